"""Загрузка, ресайз и запись изображений через Pillow.

Принципы:
- SRP: класс отвечает только за работу с кодеком; решения о путях и перезаписи - не здесь.
- Изображение декодируется целиком (`load()`), чтобы ошибки формата всплывали при чтении.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from image_resizer.errors import DecodeError, EncodeError, ParseError
from image_resizer.models.image_model import ImageData, ResizeTarget
from image_resizer.services.resize_spec_service import round_half_away

logger = logging.getLogger(__name__)

# Lanczos (3 лепестка): качество важнее скорости
RESAMPLE_FILTER = Image.Resampling.LANCZOS

_JPEG_MODES = {"1", "L", "RGB", "CMYK"}
_JPEG_EXTENSIONS = {".jpg", ".jpeg"}


def fit_within(width: int, height: int, target: ResizeTarget) -> ResizeTarget:
    """Вписывает `width` x `height` в рамку `target` с сохранением пропорций."""
    ratio = min(target.width / width, target.height / height)
    return ResizeTarget(
        width=max(1, round_half_away(width * ratio)),
        height=max(1, round_half_away(height * ratio)),
    )


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c декодированным `PIL.Image.Image` и его размерами.

        Raises:
            DecodeError: файл не читается или не распознан как изображение.
        """
        path = Path(file_path)
        try:
            with Image.open(path) as opened:
                opened.load()
                # палитра ресайзится только NEAREST, поэтому переводим в RGBA
                if opened.mode == "P":
                    pil_image = opened.convert("RGBA")
                else:
                    pil_image = opened.copy()
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Failed to open image: {path}: not a supported image") from exc
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"Failed to open image: {path}: {exc}") from exc
        except (OSError, ValueError, SyntaxError) as exc:
            raise DecodeError(f"Failed to open image: {path}: {exc}") from exc

        width, height = pil_image.size
        logger.debug("Decoded %s: %dx%d %s", path, width, height, pil_image.mode)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
        )

    def resize(self, image: ImageData, target: ResizeTarget) -> Image.Image:
        """Возвращает новое изображение размера `target`; исходное не мутирует.

        Raises:
            ParseError: размер, который Pillow не может выделить.
        """
        logger.debug("Resizing %s: %dx%d -> %dx%d", image.path, image.width, image.height, target.width, target.height)
        try:
            return image.pil_image.resize(target.size, RESAMPLE_FILTER)
        except (ValueError, OverflowError, MemoryError) as exc:
            raise ParseError(f"invalid dimensions: {target.width}x{target.height}: {exc}") from exc

    def save_image(self, image: Image.Image, file_path: str | Path) -> None:
        """Кодирует и записывает изображение; формат берётся из расширения.

        Raises:
            EncodeError: неизвестное расширение, нет прав, нет места и т.п.
        """
        path = Path(file_path)
        if path.suffix.lower() in _JPEG_EXTENSIONS and image.mode not in _JPEG_MODES:
            # JPEG не хранит альфу и палитру
            image = image.convert("RGB")
        try:
            image.save(path)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"Failed to save image: {path}: {exc}") from exc
        logger.debug("Wrote %s", path)
