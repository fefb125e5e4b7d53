import io
import os

import pytest
from PIL import Image

from clive.image_utils import (
    decode_to_png, exif_orientation, find_images, is_supported_image, needs_pillow,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.jpg", True), ("a.JPEG", True), ("a.Png", True), ("a.bmp", True),
        ("a.webp", True), ("a.gif", False), ("a.txt", False), ("jpg", False),
    ],
)
def test_is_supported_image(name, expected):
    assert is_supported_image(name) is expected


@pytest.fixture
def gallery(tmp_path):
    for name in ("b.png", "a.JPG", "notes.txt", "c.webp", "d.gif"):
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "folder.png").mkdir()
    return tmp_path


def test_find_images_filters_and_sorts(gallery):
    found = find_images(str(gallery / "*"))
    assert [os.path.basename(p) for p in found] == ["a.JPG", "b.png", "c.webp"]


def test_find_images_accepts_directory(gallery):
    assert find_images(str(gallery)) == find_images(str(gallery / "*"))


def test_find_images_narrow_pattern(gallery):
    found = find_images(str(gallery / "*.png"))
    assert [os.path.basename(p) for p in found] == ["b.png"]


def test_find_images_no_match(tmp_path):
    assert find_images(str(tmp_path / "missing" / "*")) == []


def test_decode_to_png(tmp_path):
    path = tmp_path / "small.bmp"
    Image.new("RGB", (20, 10), (255, 0, 0)).save(path)

    data = decode_to_png(str(path))

    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "PNG"
        assert img.size == (20, 10)


def test_decode_to_png_downscales_large_images(tmp_path):
    path = tmp_path / "big.png"
    Image.new("RGB", (40, 20)).save(path)

    with Image.open(io.BytesIO(decode_to_png(str(path), max_dim=8))) as img:
        assert img.size == (8, 4)


def test_decode_to_png_converts_palette_images(tmp_path):
    path = tmp_path / "pal.png"
    Image.new("P", (4, 4)).save(path)

    with Image.open(io.BytesIO(decode_to_png(str(path)))) as img:
        assert img.mode == "RGBA"


def test_decode_to_png_rejects_garbage(tmp_path):
    path = tmp_path / "broken.webp"
    path.write_bytes(b"not an image")
    with pytest.raises(OSError):
        decode_to_png(str(path))


def save_jpeg(path, orientation=None):
    exif = Image.Exif()
    if orientation is not None:
        exif[0x0112] = orientation
    Image.new("RGB", (40, 20)).save(path, exif=exif)
    return str(path)


def test_exif_orientation(tmp_path):
    assert exif_orientation(save_jpeg(tmp_path / "rot.jpg", 6)) == 6
    assert exif_orientation(save_jpeg(tmp_path / "plain.jpg")) == 1


def test_exif_orientation_of_unreadable_file(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"x")
    assert exif_orientation(str(path)) == 1


def test_needs_pillow(tmp_path):
    assert needs_pillow(save_jpeg(tmp_path / "rot.jpg", 6))
    assert not needs_pillow(save_jpeg(tmp_path / "plain.jpg", 1))
    assert needs_pillow(str(tmp_path / "any.webp"))
    assert not needs_pillow(str(tmp_path / "missing.png"))


def test_decode_to_png_applies_exif_rotation(tmp_path):
    path = save_jpeg(tmp_path / "rot.jpg", 6)
    with Image.open(io.BytesIO(decode_to_png(path))) as img:
        assert img.size == (20, 40)
