"""Tests for image file output."""

import numpy as np
import pytest
from PIL import Image

from renderer.image import save_image, write_ppm


@pytest.fixture
def gradient():
    image = np.zeros((2, 3, 3), dtype=np.uint8)
    image[0, :, 0] = [0, 100, 255]
    image[1, :, 2] = [7, 8, 9]
    return image


def test_ppm_layout(gradient, tmp_path):
    path = tmp_path / "out.ppm"
    write_ppm(gradient, str(path))
    lines = path.read_text().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert lines[3:6] == ["0 0 0", "100 0 0", "255 0 0"]
    assert lines[6:] == ["0 0 7", "0 0 8", "0 0 9"]


def test_ppm_replaces_previous_contents(gradient, tmp_path):
    path = tmp_path / "out.ppm"
    path.write_text("stale data\n" * 50)
    save_image(gradient, str(path))
    assert path.read_text().startswith("P3\n3 2\n255\n")
    assert len(path.read_text().splitlines()) == 3 + 6


@pytest.mark.parametrize("name", ["out.png", "OUT.PNG", "out.bmp"])
def test_other_formats_go_through_pillow(gradient, tmp_path, name):
    path = tmp_path / name
    save_image(gradient, str(path))
    with Image.open(path) as img:
        assert img.size == (3, 2)
        assert np.array_equal(np.asarray(img.convert("RGB")), gradient)


def test_missing_directory_raises(gradient, tmp_path):
    with pytest.raises(OSError):
        save_image(gradient, str(tmp_path / "missing" / "out.ppm"))
