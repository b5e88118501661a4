"""Контроллер пакетной обработки: оркестрация сервисов по списку файлов.

SOLID:
- SRP: класс управляет порядком шагов (без логики кодека, путей или разбора размера).
- DIP: сервисы и UI подставляются полями dataclass, в тестах их легко заменить.
Поведение:
- Файлы обрабатываются строго по одному; в памяти одновременно одно изображение.
- Отказ оператора от перезаписи - пропуск файла, не ошибка.
- Любая ошибка декодирования, разбора или записи прерывает весь запуск.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from image_resizer.config import ResizeConfig
from image_resizer.models.image_model import ResizeTarget
from image_resizer.models.job_model import ResizeJob
from image_resizer.services.image_service import ImageService, fit_within
from image_resizer.services.path_service import PathService
from image_resizer.services.resize_spec_service import ResizeSpecService
from image_resizer.ui.prompt import ConsoleReporter, OverwriteGate

logger = logging.getLogger(__name__)


@dataclass
class BatchController:
    """Связывает поиск файлов, подтверждение перезаписи и обработку изображений.

    Ответственности:
    - Раскрытие входов через `PathService`.
    - Проверка перезаписи через `OverwriteGate`.
    - Декодирование, ресайз и запись через `ImageService`.
    - Отчёт об успешных файлах через `ConsoleReporter`.
    """
    gate: OverwriteGate = field(default_factory=OverwriteGate)
    reporter: ConsoleReporter = field(default_factory=ConsoleReporter)

    _path_service: PathService = field(default_factory=PathService)
    _image_service: ImageService = field(default_factory=ImageService)
    _spec_service: ResizeSpecService = field(default_factory=ResizeSpecService)

    def run(self, config: ResizeConfig) -> int:
        """Обрабатывает все входы конфигурации; возвращает число записанных файлов.

        Raises:
            ResizerError: первая же ошибка останавливает запуск.
        """
        image_files = self._path_service.expand_inputs(config.inputs)
        logger.info("Found %d image(s) to process", len(image_files))

        processed = 0
        for input_path in image_files:
            job = self._path_service.resolve_output(input_path, config.output)
            if not self.gate.may_write(job.output_path, config.force):
                logger.info("Skipping %s: overwrite declined", job.output_path)
                continue
            self._process(job, config)
            self.reporter.processed(job.input_path, job.output_path)
            processed += 1

        logger.info("Done: %d of %d file(s) written", processed, len(image_files))
        return processed

    def target_for(self, config: ResizeConfig, width: int, height: int) -> ResizeTarget:
        """Размер, который получит изображение `width` x `height` при данной конфигурации."""
        target = self._spec_service.parse(config.resize, width, height)
        if config.keep_aspect:
            target = fit_within(width, height, target)
        return target

    # ---- Helpers ----
    def _process(self, job: ResizeJob, config: ResizeConfig) -> None:
        image = self._image_service.load_image(job.input_path)
        target = self.target_for(config, image.width, image.height)
        resized = self._image_service.resize(image, target)
        if job.input_path == job.output_path:
            logger.debug("Overwriting %s in place", job.input_path)
        self._image_service.save_image(resized, job.output_path)
