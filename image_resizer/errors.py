"""Ошибки пакетного ресайзера.

Все ошибки терминальны для запуска: `main()` печатает сообщение в stderr
и завершает процесс с ненулевым кодом.
"""
from __future__ import annotations


class ResizerError(Exception):
    """Базовый класс для всех ошибок, которые видит оператор."""


class InputError(ResizerError):
    """Пустой список входов или ни одного изображения после раскрытия."""


class GlobError(ResizerError):
    """Синтаксически неверный glob-шаблон."""


class ParseError(ResizerError):
    """Неверная строка `--resize` или неположительный итоговый размер."""


class DecodeError(ResizerError):
    """Исходный файл не читается или не является поддерживаемым изображением."""


class EncodeError(ResizerError):
    """Не удалось закодировать или записать результат."""
