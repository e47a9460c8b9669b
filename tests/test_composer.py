# tests/test_composer.py
import wave
from pathlib import Path

from PIL import Image

from img2wav.composer import convert_file, output_path_for, render_image
from img2wav.synth.duration import FixedRowDuration, FixedTotalDuration


def _save_png(path: Path, w: int, h: int, value: int) -> Path:
    Image.new("L", (w, h), value).save(path, "PNG")
    return path


def test_output_path_replaces_extension():
    assert output_path_for("pics/cat.jpeg") == Path("pics/cat.wav")

def test_render_image_per_row(tmp_path: Path):
    p = _save_png(tmp_path / "grey.png", 3, 2, 200)
    r = render_image(p, policy=FixedRowDuration(row_seconds=0.01), sample_rate=8000)
    assert r.plan.samples_per_row == 80
    assert r.raw_length == 3 * 80          # image width -> rows
    assert 0 < len(r.samples) <= r.raw_length
    assert r.duration_s == len(r.samples) / 8000

def test_black_image_renders_empty(tmp_path: Path):
    p = _save_png(tmp_path / "black.png", 4, 4, 0)
    r = render_image(p, policy=FixedTotalDuration(seconds=0.05))
    assert r.raw_length > 0
    assert len(r.samples) == 0

def test_convert_file_writes_next_to_image(tmp_path: Path):
    p = _save_png(tmp_path / "white.png", 2, 2, 255)
    out = convert_file(p, policy=FixedRowDuration(row_seconds=0.01))
    assert out == tmp_path / "white.wav"
    with wave.open(str(out), "rb") as w:
        assert w.getnchannels() == 1
        assert w.getsampwidth() == 2
        assert w.getframerate() == 44_100
        assert 0 < w.getnframes() <= 2 * 441

def test_convert_file_explicit_output(tmp_path: Path):
    p = _save_png(tmp_path / "white.png", 2, 2, 255)
    target = tmp_path / "out" / "song.wav"
    assert convert_file(p, target, policy=FixedRowDuration(row_seconds=0.01)) == target
    assert target.exists()
