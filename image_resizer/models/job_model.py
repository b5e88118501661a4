"""Модель одной единицы работы: входной файл и куда писать результат."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResizeJob:
    input_path: Path
    output_path: Path
