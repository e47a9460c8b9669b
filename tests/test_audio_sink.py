# tests/test_audio_sink.py
import wave
from array import array
from pathlib import Path

import pytest

from img2wav.audio_sink import write_wav
from img2wav.errors import SinkError


def _read(path: Path):
    with wave.open(str(path), "rb") as w:
        params = (w.getnchannels(), w.getsampwidth(), w.getframerate())
        data = array("h")
        data.frombytes(w.readframes(w.getnframes()))
    return params, data


def test_writes_mono_pcm16(tmp_path: Path):
    samples = array("h", [0, 1000, -1000, 32767, -32768])
    out = write_wav(tmp_path / "out.wav", samples, 44_100)
    params, data = _read(out)
    assert params == (1, 2, 44_100)
    assert list(data) == list(samples)

def test_accepts_plain_lists(tmp_path: Path):
    out = write_wav(tmp_path / "list.wav", [1, 2, 3], 8000)
    assert list(_read(out)[1]) == [1, 2, 3]

def test_empty_buffer_is_a_valid_file(tmp_path: Path):
    out = write_wav(tmp_path / "silent.wav", array("h"), 44_100)
    params, data = _read(out)
    assert params == (1, 2, 44_100)
    assert len(data) == 0

def test_creates_missing_directories(tmp_path: Path):
    nested = tmp_path / "deep/nested/dir/out.wav"
    out = write_wav(nested, [0], 44_100)
    assert out.exists()
    assert not (nested.parent / "out.wav.part").exists()

def test_only_mono_16_bit(tmp_path: Path):
    with pytest.raises(ValueError):
        write_wav(tmp_path / "st.wav", [0, 0], 44_100, channels=2)
    with pytest.raises(ValueError):
        write_wav(tmp_path / "24.wav", [0], 44_100, bit_depth=24)

def test_unwritable_target(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(SinkError):
        write_wav(blocker / "out.wav", [0, 1], 44_100)
    assert blocker.read_text() == "x"

def test_cleanup_failure_keeps_sink_error(tmp_path: Path, monkeypatch):
    def refuse(self, *args, **kwargs):
        raise PermissionError("locked")

    monkeypatch.setattr(wave.Wave_write, "writeframes", refuse)
    monkeypatch.setattr(Path, "unlink", refuse)
    with pytest.raises(SinkError):
        write_wav(tmp_path / "out.wav", [0, 1], 44_100)
