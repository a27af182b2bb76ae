import pytest

from worldinfire.battle import FinalBattle, Monster
from worldinfire.sound import Sound, Track


def test_monster_keeps_hp():
    assert Monster(100).hp == 100


def test_take_damage_reduces_hp():
    monster = Monster(100)
    monster.take_damage(30)
    assert monster.hp == 70


def test_take_damage_stops_at_zero():
    monster = Monster(100)
    monster.take_damage(150)
    assert monster.hp == 0


def test_repeated_damage_never_negative():
    monster = Monster(100)
    for amount in (35, 35, 35, 35):
        monster.take_damage(amount)
        assert monster.hp >= 0
    assert monster.hp == 0


def test_exact_damage_reaches_zero():
    monster = Monster(20)
    monster.take_damage(20)
    assert monster.hp == 0


def test_final_battle_plays_boss_music():
    sound = Sound(enabled=False)
    FinalBattle(sound)
    assert sound.playing is Track.BOSS_FIGHT


def test_final_battle_stops_music_on_exit():
    sound = Sound(enabled=False)
    with FinalBattle(sound) as battle:
        assert battle.sound is sound
        assert sound.playing is Track.BOSS_FIGHT
    assert sound.playing is None


def test_final_battle_stops_music_on_error():
    sound = Sound(enabled=False)
    with pytest.raises(KeyError):
        with FinalBattle(sound):
            raise KeyError("boom")
    assert sound.playing is None