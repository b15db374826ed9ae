"""Чтение изображений с диска и запись результата в PNG.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование через Pillow.
- Ошибки Pillow и ОС переводятся в исключения приложения с исходной причиной (`from exc`).
"""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from imagesizer.errors import DecodeError, EncodeError, ResourceExhaustionError
from imagesizer.models.image_model import ImageData

log = logging.getLogger(__name__)

MEMORY_HINT = (
    "this image was too large. Try raising IMAGESIZER_MAX_PIXELS "
    "or running with more available memory."
)


def normalize_mode(image: Image.Image) -> Image.Image:
    """Приводит изображение к RGB или RGBA (палитровые, серые, CMYK и т.п.)."""
    if image.mode in ("RGB", "RGBA"):
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с путём и форматом файла.

        Args:
            file_path: Путь до файла изображения (JPEG, GIF, BMP, PNG и всё, что читает Pillow).

        Returns:
            `ImageData` c `PIL.Image.Image` в режиме RGB/RGBA.

        Raises:
            DecodeError: если путь не существует или файл не распознан как изображение.
            ResourceExhaustionError: если изображение превышает лимит пикселей или память.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise DecodeError(f"File not found: {path}")

        try:
            with Image.open(path) as opened:
                opened.load()
                source_format = opened.format
                pil_image = normalize_mode(opened)
                if pil_image is opened:
                    pil_image = opened.copy()
        except Image.DecompressionBombError as exc:
            raise ResourceExhaustionError(f"{path}: {MEMORY_HINT}") from exc
        except MemoryError as exc:
            raise ResourceExhaustionError(f"{path}: {MEMORY_HINT}") from exc
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Not an image file: {path}") from exc
        except (OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"Cannot read image {path}: {exc}") from exc

        width, height = pil_image.size
        if width <= 0 or height <= 0:
            raise DecodeError(f"Image has no pixels: {path}")

        image_data = ImageData(path=path, pil_image=pil_image, source_format=source_format)
        log.debug("decoded %s: %s", path, image_data.describe())
        return image_data

    def save_image(self, image: Image.Image, file_path: str | Path, format: str = "PNG") -> Path:
        """Записывает изображение; существующий файл перезаписывается.

        Raises:
            EncodeError: если файл не удалось закодировать или записать.
            ResourceExhaustionError: если не хватило памяти на кодирование.
        """
        path = Path(file_path)
        try:
            image.save(path, format=format)
        except MemoryError as exc:
            raise ResourceExhaustionError(f"{path}: {MEMORY_HINT}") from exc
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"Cannot write {format} file {path}: {exc}") from exc
        log.debug("encoded %s as %s", path, format)
        return path
