"""Задания пакетной обработки и итог пакета."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from imagesizer.models.geometry import DisplayGeometry
from imagesizer.models.image_model import ImageData


@dataclass(frozen=True)
class FileJob:
    """Пара «входной файл -> выходной PNG»."""
    input_path: Path
    output_path: Path


@dataclass(frozen=True)
class TransformRequest:
    """Одно изображение и геометрия, под которую его нужно подогнать."""
    source: ImageData
    geometry: DisplayGeometry


@dataclass
class BatchReport:
    """Итог пакета: записанные файлы и файлы с ошибками (путь, сообщение)."""
    written: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed
