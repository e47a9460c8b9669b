# tests/test_conversion.py
from pathlib import Path

import pytest
from PIL import Image

from img2wav.conversion import grid_from_image, read_image
from img2wav.errors import DecodeError


def _save_png(path: Path, mode: str, pixels, w: int, h: int) -> Path:
    im = Image.new(mode, (w, h))
    im.putdata(pixels)
    im.save(path, "PNG")
    return path


def _flat(matrix):
    return [v for row in matrix for v in row]


def test_orientation_flip_then_rotate_ccw(tmp_path: Path):
    # 3 wide x 2 tall:
    #   0   51  102
    #   153 204 255
    p = _save_png(tmp_path / "gray.png", "L", [0, 51, 102, 153, 204, 255], 3, 2)
    grid = read_image(p)

    # rows come from image columns (right to left), cols from image rows (bottom to top)
    assert (grid.rows, grid.cols) == (3, 2)
    assert _flat(grid.intensity) == pytest.approx([1.0, 0.4, 0.8, 0.2, 0.6, 0.0])
    assert grid.has_opacity is False

def test_rgb_is_grayscaled(tmp_path: Path):
    p = _save_png(tmp_path / "bw.png", "RGB", [(255, 255, 255), (0, 0, 0)], 2, 1)
    grid = read_image(p)
    assert (grid.rows, grid.cols) == (2, 1)
    assert _flat(grid.intensity) == pytest.approx([0.0, 1.0])

def test_rgba_carries_opacity(tmp_path: Path):
    p = _save_png(tmp_path / "alpha.png", "RGBA", [(255, 255, 255, 0), (255, 255, 255, 255)], 2, 1)
    grid = read_image(p)
    assert grid.has_opacity is True
    assert _flat(grid.opacity) == pytest.approx([1.0, 0.0])
    assert _flat(grid.intensity) == pytest.approx([1.0, 1.0])

def test_la_carries_opacity(tmp_path: Path):
    p = _save_png(tmp_path / "la.png", "LA", [(255, 51)], 1, 1)
    grid = read_image(p)
    assert _flat(grid.opacity) == pytest.approx([0.2])

def test_palette_with_transparency_carries_opacity():
    im = Image.new("P", (2, 2), 0)
    im.info["transparency"] = 0
    grid = grid_from_image(im)
    assert grid.has_opacity is True
    assert set(_flat(grid.opacity)) == {0.0}

def test_max_size_downscales(tmp_path: Path):
    im = Image.new("L", (40, 20), 128)
    p = tmp_path / "big.png"
    im.save(p, "PNG")
    grid = read_image(p, max_size=10)
    assert (grid.rows, grid.cols) == (10, 5)

def test_unsupported_mode():
    with pytest.raises(DecodeError):
        grid_from_image(Image.new("I", (2, 2)))

def test_missing_file(tmp_path: Path):
    with pytest.raises(DecodeError):
        read_image(tmp_path / "nope.png")

def test_bad_file(tmp_path: Path):
    p = tmp_path / "bad.jpg"
    p.write_bytes(b"not an image")
    with pytest.raises(DecodeError):
        read_image(p)

def test_decode_error_is_value_error(tmp_path: Path):
    with pytest.raises(ValueError):
        read_image(tmp_path / "nope.png")

def test_decompression_bomb_is_decode_error(tmp_path: Path, monkeypatch):
    p = tmp_path / "big.png"
    Image.new("L", (10, 10), 0).save(p, "PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)   # 100 px > 2 * limit
    with pytest.raises(DecodeError):
        read_image(p)

def test_bad_max_size_is_not_a_decode_error(tmp_path: Path):
    p = _save_png(tmp_path / "one.png", "L", [0], 1, 1)
    with pytest.raises(ValueError) as info:
        read_image(p, max_size=0)
    assert not isinstance(info.value, DecodeError)
