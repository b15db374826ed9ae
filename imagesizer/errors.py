"""Иерархия исключений ImageSizer.

Принципы:
- Ошибки конфигурации прерывают весь запуск до обработки файлов.
- Ошибки отдельного файла (чтение, память, запись) локальны: пакет продолжается.
"""
from __future__ import annotations


class ImageSizerError(Exception):
    """Базовое исключение приложения."""


class ConfigurationError(ImageSizerError):
    """Неверные или отсутствующие аргументы командной строки / окружения."""


class ConstructionError(ImageSizerError, ValueError):
    """Недопустимая геометрия дисплея (размеры <= 0 или отрицательный зазор)."""


class DecodeError(ImageSizerError):
    """Файл не найден или не распознан как изображение."""


class ResourceExhaustionError(ImageSizerError):
    """Изображение слишком велико для доступной памяти или лимита пикселей."""


class EncodeError(ImageSizerError):
    """Результат не удалось записать на диск."""


WriteError = EncodeError


class PreconditionError(ImageSizerError, ValueError):
    """Сочетание исходника и геометрии требует отрицательного смещения кадрирования."""
