"""Параметры одного запуска, собранные из командной строки."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class ResizeConfig:
    """Неизменяемая конфигурация запуска.

    Fields:
        inputs: Пути, каталоги и glob-шаблоны в порядке ввода.
        resize: Строка размера, "WxH" или "N%".
        output: Файл или каталог для результата; None - перезапись на месте.
        force: Не спрашивать перед перезаписью.
        keep_aspect: Вписывать в WxH с сохранением пропорций.
        max_pixels: Лимит Pillow против decompression bomb; None - без лимита.
        verbose: Подробный лог (DEBUG).
    """
    inputs: List[str] = field(default_factory=list)
    resize: str = ""
    output: Optional[Path] = None
    force: bool = False
    keep_aspect: bool = False
    max_pixels: Optional[int] = None
    verbose: bool = False
