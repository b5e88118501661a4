from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from image_resizer.errors import DecodeError, EncodeError
from image_resizer.models.image_model import ResizeTarget
from image_resizer.services.image_service import ImageService, fit_within


def image_size(path: Path) -> tuple[int, int]:
    with Image.open(path) as img:
        return img.size


def test_load_image_reads_metadata(tmp_path: Path, make_image) -> None:
    path = make_image(tmp_path / "a.png", size=(30, 12))

    data = ImageService().load_image(path)

    assert (data.width, data.height) == (30, 12)
    assert data.pil_image.mode == "RGB"
    assert data.path == path


def test_load_palette_image_converts_to_rgba(tmp_path: Path) -> None:
    path = tmp_path / "p.gif"
    Image.new("P", (8, 8), color=3).save(path)

    assert ImageService().load_image(path).pil_image.mode == "RGBA"


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DecodeError, match="missing.png"):
        ImageService().load_image(tmp_path / "missing.png")


def test_load_garbage_with_image_extension(tmp_path: Path) -> None:
    path = tmp_path / "fake.jpg"
    path.write_bytes(b"definitely not a jpeg")
    with pytest.raises(DecodeError):
        ImageService().load_image(path)


def test_resize_and_save_exact(tmp_path: Path, make_image) -> None:
    service = ImageService()
    data = service.load_image(make_image(tmp_path / "a.png", size=(40, 20)))

    resized = service.resize(data, ResizeTarget(17, 33))
    service.save_image(resized, tmp_path / "b.webp")

    assert image_size(tmp_path / "b.webp") == (17, 33)
    assert data.pil_image.size == (40, 20)


def test_save_rgba_as_jpeg(tmp_path: Path, make_image) -> None:
    service = ImageService()
    data = service.load_image(make_image(tmp_path / "a.png", mode="RGBA"))

    service.save_image(data.pil_image, tmp_path / "a.jpg")

    with Image.open(tmp_path / "a.jpg") as img:
        assert img.mode == "RGB"


def test_save_unknown_extension(tmp_path: Path, make_image) -> None:
    data = ImageService().load_image(make_image(tmp_path / "a.png"))
    with pytest.raises(EncodeError, match="Failed to save image"):
        ImageService().save_image(data.pil_image, tmp_path / "a.unknown")


def test_save_into_missing_directory(tmp_path: Path, make_image) -> None:
    data = ImageService().load_image(make_image(tmp_path / "a.png"))
    with pytest.raises(EncodeError):
        ImageService().save_image(data.pil_image, tmp_path / "nope" / "a.png")


@pytest.mark.parametrize(
    "src, box, expected",
    [
        ((200, 100), ResizeTarget(100, 100), ResizeTarget(100, 50)),
        ((100, 200), ResizeTarget(100, 100), ResizeTarget(50, 100)),
        ((100, 100), ResizeTarget(300, 150), ResizeTarget(150, 150)),
        ((1000, 1), ResizeTarget(10, 10), ResizeTarget(10, 1)),
    ],
)
def test_fit_within(src: tuple[int, int], box: ResizeTarget, expected: ResizeTarget) -> None:
    assert fit_within(*src, box) == expected
