"""Взаимодействие с оператором в терминале: подтверждение перезаписи и отчёт."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO


class OverwriteGate:
    """Решает, можно ли писать в путь результата.

    При `force` или отсутствии файла разрешает сразу. Иначе один раз спрашивает
    оператора и ждёт строку без таймаута; согласие - только "y" (без учёта регистра).
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def may_write(self, output_path: Path, force: bool) -> bool:
        if force or not output_path.exists():
            return True
        return self._confirm(output_path)

    def _confirm(self, output_path: Path) -> bool:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout
        print(f"Output file {output_path} already exists. Overwrite? [y/N]", file=stdout, flush=True)
        answer = stdin.readline()
        return answer.strip().lower() == "y"


class ConsoleReporter:
    def __init__(self, stdout: Optional[TextIO] = None) -> None:
        self._stdout = stdout

    def processed(self, input_path: Path, output_path: Path) -> None:
        print(f"Processed: {input_path} -> {output_path}", file=self._stdout or sys.stdout)
