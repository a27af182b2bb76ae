[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "worldinfire"
version = "0.1.0"
description = "A text adventure in the terminal: choose a class, explore a cave and fight a mutant rabbit."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "role-playing", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
worldinfire = "worldinfire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["worldinfire"]

[tool.pytest.ini_options]
addopts = "-ra"
