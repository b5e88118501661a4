"""Композиция приложения: разбор аргументов, настройка логов и запуск контроллера.

Принципы:
- Единственное место, где трогается глобальное состояние (logging, `Image.MAX_IMAGE_PIXELS`).
- Контроллер получает готовый `ResizeConfig` и ничего не знает об argparse.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from image_resizer.config import ResizeConfig
from image_resizer.controllers.batch_controller import BatchController

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-resizer",
        description="Simple batch image resizer.",
    )
    parser.add_argument("inputs", nargs="*", metavar="INPUT", help="Input image path, directory or glob pattern.")
    parser.add_argument("--resize", required=True, help='Resize dimensions (e.g. "500x400" or "20%%").')
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file or directory (optional).")
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite files without prompting.")
    parser.add_argument(
        "--keep-aspect",
        action="store_true",
        help="Fit inside WxH preserving the aspect ratio instead of stretching.",
    )
    parser.add_argument(
        "--max-pixels",
        type=int,
        default=None,
        help="Refuse images larger than this many pixels (default: no limit).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> ResizeConfig:
    args = build_parser().parse_args(argv)
    return ResizeConfig(
        inputs=list(args.inputs),
        resize=args.resize,
        output=args.output,
        force=args.force,
        keep_aspect=args.keep_aspect,
        max_pixels=args.max_pixels,
        verbose=args.verbose,
    )


class ResizerApp:
    def __init__(self, config: ResizeConfig, controller: Optional[BatchController] = None) -> None:
        self.config = config
        self._controller = controller or BatchController()

    def configure(self) -> None:
        logging.basicConfig(
            level=logging.DEBUG if self.config.verbose else logging.WARNING,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        # huge sources are the point of the tool, so no bomb limit unless asked
        Image.MAX_IMAGE_PIXELS = self.config.max_pixels

    def run(self) -> int:
        self.configure()
        return self._controller.run(self.config)
