"""Контроллер пакетной обработки: чтение -> подгонка -> запись для каждого файла.

SOLID:
- SRP: класс управляет порядком этапов и отчётом, без логики обработки изображений.
- DIP: зависит от сервисов как от ролей; реализации подставляются при создании.
Ошибки одного файла не прерывают пакет: они печатаются и попадают в `BatchReport`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from imagesizer.cli.console import Console
from imagesizer.errors import ImageSizerError
from imagesizer.models.geometry import DisplayGeometry
from imagesizer.models.job_model import BatchReport, FileJob, TransformRequest
from imagesizer.services.image_service import ImageService
from imagesizer.services.sizer_service import SizerService

log = logging.getLogger(__name__)


@dataclass
class BatchController:
    """Прогоняет задания по одному, последовательно.

    Ответственности:
    - Декодирование через `ImageService`.
    - Подгонка под геометрию через `SizerService`.
    - Запись PNG и вывод прогресса через `Console`.
    """
    geometry: DisplayGeometry
    console: Console = field(default_factory=Console)

    _image_service: ImageService = field(default_factory=ImageService)
    _sizer_service: SizerService = field(default_factory=SizerService)

    def run(self, jobs: Iterable[FileJob]) -> BatchReport:
        report = BatchReport()
        for job in jobs:
            try:
                self.process(job)
            except ImageSizerError as exc:
                self.console.failed(str(exc))
                self.console.blank()
                log.debug("failed to process %s", job.input_path, exc_info=True)
                report.failed.append((job.input_path, str(exc)))
            except Exception as exc:
                self.console.failed(repr(exc))
                self.console.blank()
                log.exception("unexpected error while processing %s", job.input_path)
                report.failed.append((job.input_path, repr(exc)))
            else:
                report.written.append(job.output_path)
        return report

    def process(self, job: FileJob) -> None:
        """Обрабатывает одну пару файлов; исключения уходят вызывающему."""
        self.console.stage(f"Reading image: {job.input_path.absolute()} ... ")
        image_data = self._image_service.load_image(job.input_path)
        self.console.done()

        self.console.stage("Resizing... ")
        request = TransformRequest(source=image_data, geometry=self.geometry)
        output = self._sizer_service.run(request)
        self.console.done()

        self.console.stage("Saving result... ")
        self._image_service.save_image(output, job.output_path, format="PNG")
        self.console.done()

        self.console.result(job.output_path)
        log.info("%s (%s) -> %s", image_data.path, image_data.describe(), job.output_path)
