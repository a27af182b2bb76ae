"""World In Fire: a terminal text adventure with class choice, a cave and a rabbit fight."""

__version__ = "0.1.0"