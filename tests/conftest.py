from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image


@pytest.fixture
def make_image() -> Callable[..., Path]:
    def _make(path: Path, size: tuple[int, int] = (40, 20), mode: str = "RGB") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        color = (200, 30, 30, 255) if mode == "RGBA" else (200, 30, 30)
        Image.new(mode, size, color=color).save(path)
        return path

    return _make

