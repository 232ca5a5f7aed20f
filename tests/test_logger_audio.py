import subprocess

import pytest

from tourguide import Audio, Logger


def test_logger_writes_file_and_callback(tmp_path, capsys):
    path = tmp_path / "guide.log"
    seen = []
    logger = Logger(str(path), callback=lambda message, data: seen.append((message, data)))
    logger.log("Tour committed", {"tour": "T1"})
    logger.section("PLAYBACK")
    logger.close()

    text = path.read_text()
    assert "Tour Guide Log" in text
    assert 'Tour committed | {"tour": "T1"}' in text
    assert "PLAYBACK" in text
    assert seen == [("Tour committed", {"tour": "T1"})]
    assert "Tour committed" in capsys.readouterr().out


def test_logger_can_be_silent(capsys):
    logger = Logger(echo=False)
    logger.log("quiet")
    assert capsys.readouterr().out == ""


@pytest.fixture
def audio_callback():
    spoken = []
    Audio.set_callback(spoken.append)
    yield spoken
    Audio.set_callback(None)


def test_speak_falls_back_to_print(monkeypatch, capsys, audio_callback):
    def missing(*args, **kwargs):
        raise FileNotFoundError("espeak")
    monkeypatch.setattr(subprocess, "run", missing)

    Audio.speak("west, 500")
    assert audio_callback == ["west, 500"]
    assert "[AUDIO] west, 500" in capsys.readouterr().out


def test_speak_uses_espeak(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: calls.append(cmd))
    Audio.speak("Tour complete")
    assert calls == [["espeak", "-s", "150", "Tour complete"]]
