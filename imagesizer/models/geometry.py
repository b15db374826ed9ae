"""Геометрия двухмониторного рабочего стола.

Принципы:
- Инварианты проверяются один раз при создании, дальше объект только читается.
- Неизменяемость (`frozen=True`): одна геометрия разделяется всеми файлами пакета.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from imagesizer.errors import ConstructionError


@dataclass(frozen=True)
class DisplayGeometry:
    """Целевой размер рабочего стола и зазор между мониторами.

    Fields:
        width: Видимая ширина обоих мониторов без зазора, px.
        height: Высота мониторов, px.
        gap_width: Ширина рамок между мониторами в пикселях изображения.

    Raises:
        ConstructionError: если width/height <= 0 или gap_width < 0.
    """
    width: int
    height: int
    gap_width: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.gap_width < 0:
            raise ConstructionError(
                "The width and height parameters must be positive and gapWidth must not be negative "
                f"(got width={self.width}, height={self.height}, gapWidth={self.gap_width})."
            )

    @property
    def real_width(self) -> int:
        """Ширина виртуального рабочего стола вместе с зазором."""
        return self.width + self.gap_width

    @property
    def real_ratio(self) -> float:
        return self.real_width / self.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def split_x(self) -> int:
        """Первый столбец правого монитора; при нечётной ширине лишний столбец уходит вправо."""
        return self.width // 2
