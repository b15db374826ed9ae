"""Декодированный исходник, который проходит через конвейер подгонки."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Изображение, прочитанное из `path`; пиксели в RGB или RGBA.

    `source_format` - формат файла, определённый Pillow ("JPEG", "GIF", ...),
    результат всегда пишется в PNG независимо от него.
    """
    path: Path
    pil_image: Image.Image
    source_format: Optional[str] = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.pil_image.size

    def describe(self) -> str:
        width, height = self.size
        return f"{self.source_format or 'image'} {width}x{height} {self.pil_image.mode}"
