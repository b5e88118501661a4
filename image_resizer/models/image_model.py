"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Полностью загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int


@dataclass(frozen=True)
class ResizeTarget:
    """Целевой размер в пикселях (обе стороны > 0)."""
    width: int
    height: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
