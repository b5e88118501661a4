"""Поиск изображений на диске и вычисление путей результата.

Принципы:
- SRP: сервис только раскрывает входы в список файлов и решает, куда писать.
- Порядок результата: порядок входов; внутри каталога или шаблона - порядок обхода.
- Дубликаты от пересекающихся входов не удаляются.
"""
from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from image_resizer.errors import GlobError, InputError
from image_resizer.models.job_model import ResizeJob

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp"})
_SEPARATORS = {"/", os.sep}


def is_image_file(path: str | Path) -> bool:
    """True, если расширение пути - одно из поддерживаемых (без учёта регистра)."""
    ext = Path(path).suffix.lower().lstrip(".")
    return ext in IMAGE_EXTENSIONS


def validate_glob(pattern: str) -> None:
    """Проверяет синтаксис шаблона.

    Raises:
        GlobError: незакрытый `[`, `***` или `**`, не образующий целый компонент пути.
    """
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            run = 1
            while i + run < n and pattern[i + run] == "*":
                run += 1
            if run > 2:
                raise GlobError(f"invalid glob pattern {pattern!r}: wildcards are either `*` or `**`")
            if run == 2:
                before_ok = i == 0 or pattern[i - 1] in _SEPARATORS
                after_ok = i + 2 == n or pattern[i + 2] in _SEPARATORS
                if not (before_ok and after_ok):
                    raise GlobError(
                        f"invalid glob pattern {pattern!r}: `**` must form a single path component"
                    )
            i += run
        elif ch == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # leading `]` is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise GlobError(f"invalid glob pattern {pattern!r}: unclosed character class")
            i = close + 1
        else:
            i += 1


class PathService:
    def expand_inputs(self, inputs: Iterable[str | Path]) -> List[Path]:
        """Раскрывает входы (файлы, каталоги, glob-шаблоны) в список изображений.

        Args:
            inputs: Пути в том порядке, в котором их передал оператор.

        Returns:
            Список путей с поддерживаемыми расширениями.

        Raises:
            InputError: если входов нет или не найдено ни одного изображения.
            GlobError: если шаблон синтаксически неверен.
        """
        inputs = list(inputs)
        if not inputs:
            raise InputError("no inputs")

        image_files: List[Path] = []
        for raw in inputs:
            path = Path(raw)
            if path.is_dir():
                found = list(self._walk_directory(path))
                logger.debug("Directory %s: %d image(s)", path, len(found))
            elif "*" in str(raw):
                found = self._expand_glob(str(raw))
                logger.debug("Pattern %s: %d image(s)", raw, len(found))
            elif is_image_file(path):
                found = [path]
            else:
                logger.info("Skipping non-image input: %s", path)
                found = []
            image_files.extend(found)

        if not image_files:
            raise InputError("no valid images found")
        return image_files

    def resolve_output(self, input_path: Path, output: Optional[Path]) -> ResizeJob:
        """Определяет путь результата для одного входа.

        Каталог -> в него кладётся файл с тем же именем; файл -> используется как есть;
        без `output` файл перезаписывается на месте.
        """
        if output is None:
            return ResizeJob(input_path=input_path, output_path=input_path)
        if output.is_dir():
            return ResizeJob(input_path=input_path, output_path=output / input_path.name)
        return ResizeJob(input_path=input_path, output_path=output)

    # ---- Helpers ----
    def _walk_directory(self, root: Path) -> Iterator[Path]:
        # unreadable subdirectories are skipped by os.walk
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for name in sorted(filenames):
                candidate = Path(dirpath) / name
                if candidate.is_symlink() or not candidate.is_file():
                    continue
                if is_image_file(candidate):
                    yield candidate

    def _expand_glob(self, pattern: str) -> List[Path]:
        validate_glob(pattern)
        matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
        return [Path(m) for m in matches if is_image_file(m)]
