"""Разбор строки `--resize` в конкретный размер.

Грамматика:
- "N%"  - масштаб относительно исходного размера, N - число с плавающей точкой;
- "WxH" - точный размер, W и H - беззнаковые целые.
"""
from __future__ import annotations

import math
import re

from image_resizer.errors import ParseError
from image_resizer.models.image_model import ResizeTarget

_U32_MAX = 2**32 - 1
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def round_half_away(value: float) -> int:
    """Округление к ближайшему, половины - от нуля (в отличие от встроенного `round`)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _parse_dimension(text: str, name: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseError(f"invalid {name}: {text}")
    value = int(text)
    if value > _U32_MAX:
        raise ParseError(f"invalid {name}: {text}")
    return value


class ResizeSpecService:
    def parse(self, spec: str, source_width: int, source_height: int) -> ResizeTarget:
        """Возвращает целевой размер для изображения `source_width` x `source_height`.

        Raises:
            ParseError: неверный формат или неположительная итоговая сторона.
        """
        if spec.endswith("%"):
            width, height = self._parse_percentage(spec, source_width, source_height)
        else:
            width, height = self._parse_dimensions(spec)

        if width <= 0 or height <= 0:
            raise ParseError(f"invalid dimensions: {width}x{height} from {spec!r}")
        return ResizeTarget(width=width, height=height)

    def _parse_percentage(self, spec: str, source_width: int, source_height: int) -> tuple[int, int]:
        text = spec[:-1]
        if not _FLOAT_RE.fullmatch(text):
            raise ParseError(f"invalid percentage: {spec}")
        try:
            percent = float(text)
        except ValueError as exc:
            raise ParseError(f"invalid percentage: {spec}") from exc
        if not math.isfinite(percent):
            raise ParseError(f"invalid percentage: {spec}")
        scale = percent / 100.0
        return (round_half_away(source_width * scale), round_half_away(source_height * scale))

    def _parse_dimensions(self, spec: str) -> tuple[int, int]:
        parts = spec.split("x")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ParseError(f"bad format: {spec!r}, expected 'WxH' or 'N%'")
        return (_parse_dimension(parts[0], "width"), _parse_dimension(parts[1], "height"))
