import curses

from focus_keys import SoundCue
from sound_feedback import TerminalSound


def test_disabled_sound_only_records_cue(monkeypatch):
    beeps = []
    monkeypatch.setattr(curses, "beep", lambda: beeps.append(1))
    sound = TerminalSound(enabled=False)
    sound.play_directional(SoundCue.UP)
    assert sound.last_cue is SoundCue.UP
    assert beeps == []


def test_enabled_sound_rings_bell(monkeypatch):
    beeps = []
    monkeypatch.setattr(curses, "beep", lambda: beeps.append(1))
    sound = TerminalSound()
    sound.play_directional(SoundCue.LEFT)
    assert beeps == [1]
