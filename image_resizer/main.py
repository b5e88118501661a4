"""Точка входа в приложение."""
from __future__ import annotations

import sys
from typing import Optional, Sequence

from image_resizer.app import ResizerApp, parse_config
from image_resizer.errors import ResizerError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, запускает обработку и возвращает код выхода."""
    config = parse_config(argv)
    app = ResizerApp(config)
    try:
        app.run()
    except ResizerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
