"""Подгонка изображения под два монитора с вырезанием зазора между ними.

Алгоритм:
1. Изображение пропорционально масштабируется (бикубически) так, чтобы покрыть
   виртуальный рабочий стол `(width + gap) x height`.
2. Масштабированное изображение центрируется над виртуальным столом.
3. В результат размером `width x height` копируются пиксели: левая половина как есть,
   правая со сдвигом на `gap` столбцов, т.е. полоса под рамками мониторов выбрасывается.

Сервис не хранит состояния: один экземпляр можно вызывать для любого числа файлов.
"""
from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from imagesizer.errors import PreconditionError, ResourceExhaustionError
from imagesizer.models.geometry import DisplayGeometry
from imagesizer.models.job_model import TransformRequest
from imagesizer.services.image_service import MEMORY_HINT, normalize_mode

log = logging.getLogger(__name__)

Size = Tuple[int, int]


class SizerService:
    def scale_factor(self, source_size: Size, geometry: DisplayGeometry) -> Fraction:
        """Единый коэффициент масштабирования для обеих осей.

        Отношения сторон сравниваются точно, перекрёстным умножением целых:
        при равенстве коэффициент равен 1 и масштабирование не выполняется.
        """
        src_w, src_h = source_size
        real_w, height = geometry.real_width, geometry.height
        lhs = src_w * height
        rhs = real_w * src_h
        if lhs < rhs:
            # relatively taller: fit width
            return Fraction(real_w, src_w)
        if lhs > rhs:
            # relatively wider: fit height
            return Fraction(height, src_h)
        return Fraction(1)

    def scaled_size(self, source_size: Size, geometry: DisplayGeometry) -> Size:
        """Размер после пропорционального масштабирования.

        Сторона, не совпавшая с виртуальным столом, округляется вверх,
        чтобы не оказаться меньше него.
        """
        scale = self.scale_factor(source_size, geometry)
        src_w, src_h = source_size
        return math.ceil(src_w * scale), math.ceil(src_h * scale)

    def _resample(self, source: Image.Image, scaled_size: Size, scale: Fraction) -> Image.Image:
        # box maps onto scaled_size at exactly `scale` on both axes;
        # the rounded-up side may reach past the edge, which is padded by repetition
        box_w = scaled_size[0] / scale
        box_h = scaled_size[1] / scale
        pad_x = max(0, math.ceil(box_w) - source.width)
        pad_y = max(0, math.ceil(box_h) - source.height)
        if pad_x or pad_y:
            pixels = np.pad(np.asarray(source), ((0, pad_y), (0, pad_x), (0, 0)), mode="edge")
            source = Image.fromarray(pixels)
        return source.resize(
            scaled_size, Image.Resampling.BICUBIC, box=(0, 0, float(box_w), float(box_h))
        )

    def crop_origin(self, scaled: Size, geometry: DisplayGeometry) -> Tuple[int, int]:
        """Смещение, центрирующее масштабированное изображение над виртуальным столом.

        Raises:
            PreconditionError: если изображение меньше виртуального стола (смещение < 0).
        """
        scaled_w, scaled_h = scaled
        start_x = (scaled_w - geometry.real_width) // 2
        start_y = (scaled_h - geometry.height) // 2
        if start_x < 0 or start_y < 0:
            raise PreconditionError(
                f"Image of {scaled_w}x{scaled_h} cannot cover a "
                f"{geometry.real_width}x{geometry.height} desktop (crop origin {start_x},{start_y})."
            )
        return start_x, start_y

    def create_destination(self, source: Image.Image, geometry: DisplayGeometry) -> Image.Image:
        """Пустой (нулевой) буфер размером с рабочий стол в режиме исходника."""
        return Image.new(normalize_mode(source).mode, geometry.size)

    def transform(
        self,
        source: Image.Image,
        geometry: DisplayGeometry,
        dest: Optional[Image.Image] = None,
    ) -> Image.Image:
        """Масштабирует, кадрирует и вырезает зазор; результат ровно `geometry.size`.

        Args:
            source: Исходное изображение (не изменяется).
            geometry: Целевая геометрия, уже проверенная при создании.
            dest: Необязательный готовый буфер; должен совпадать по размеру с геометрией.

        Raises:
            ValueError: если `dest` другого размера или у исходника нет пикселей.
            PreconditionError: см. `crop_origin`.
            ResourceExhaustionError: если не хватило памяти на промежуточные буферы.
        """
        if source.width <= 0 or source.height <= 0:
            raise ValueError(f"Source image has no pixels ({source.width}x{source.height}).")
        if dest is not None and dest.size != geometry.size:
            raise ValueError(
                f"Illegal dimensions for destination buffer: {dest.size[0]}x{dest.size[1]}, "
                f"expected {geometry.width}x{geometry.height}."
            )

        try:
            return self._transform(normalize_mode(source), geometry, dest)
        except MemoryError as exc:
            raise ResourceExhaustionError(f"Resizing failed: {MEMORY_HINT}") from exc

    def run(self, request: TransformRequest, dest: Optional[Image.Image] = None) -> Image.Image:
        return self.transform(request.source.pil_image, request.geometry, dest)

    def _transform(
        self, source: Image.Image, geometry: DisplayGeometry, dest: Optional[Image.Image]
    ) -> Image.Image:
        scale = self.scale_factor(source.size, geometry)
        scaled_size = self.scaled_size(source.size, geometry)
        if scale != 1:
            scaled = self._resample(source, scaled_size, scale)
        else:
            scaled = source
        start_x, start_y = self.crop_origin(scaled.size, geometry)
        log.debug(
            "source %dx%d -> scaled %dx%d, crop origin (%d, %d), gap %d",
            source.width, source.height, scaled.width, scaled.height,
            start_x, start_y, geometry.gap_width,
        )

        pixels = np.asarray(scaled)
        rows = pixels[start_y:start_y + geometry.height]
        split = geometry.split_x
        gap = geometry.gap_width
        # dest column i reads source column i + start_x (+ gap on the right monitor)
        left = rows[:, start_x:start_x + split]
        right = rows[:, start_x + split + gap:start_x + geometry.width + gap]
        spliced = np.ascontiguousarray(np.concatenate((left, right), axis=1))
        result = Image.fromarray(spliced)

        if dest is None:
            return result
        if dest.mode != result.mode:
            result = result.convert(dest.mode)
        dest.paste(result, (0, 0))
        return dest
