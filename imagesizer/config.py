"""Настройки приложения: значения по умолчанию и переопределения из окружения."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from PIL import Image

from imagesizer.errors import ConfigurationError

ENV_PREFIX = "IMAGESIZER_"


@dataclass(frozen=True)
class Settings:
    """Неизменяемый набор настроек запуска.

    Fields:
        default_width: Общая ширина рабочего стола без зазора, px.
        default_height: Высота мониторов, px.
        default_gap: Ширина зазора между мониторами, px.
        output_suffix: Суффикс, заменяющий расширение входного файла.
        max_image_pixels: Лимит Pillow против decompression bomb (None - без лимита).
        debug: Включает уровень логирования DEBUG.
        log_file: Путь к файлу журнала, если логи не нужны в stderr.
    """
    default_width: int = 1280 * 2
    default_height: int = 1024
    default_gap: int = 120
    output_suffix: str = ".resized.png"
    max_image_pixels: Optional[int] = Image.MAX_IMAGE_PIXELS
    debug: bool = False
    log_file: Optional[str] = None


def _env_int(environ: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Собирает `Settings` из переменных окружения IMAGESIZER_*.

    Raises:
        ConfigurationError: если числовая переменная не является целым числом.
    """
    if environ is None:
        environ = os.environ
    defaults = Settings()

    max_pixels = _env_int(environ, "MAX_PIXELS", defaults.max_image_pixels)
    # 0 or a negative value disables Pillow's limit
    if max_pixels is not None and max_pixels <= 0:
        max_pixels = None

    return Settings(
        default_width=_env_int(environ, "WIDTH", defaults.default_width),
        default_height=_env_int(environ, "HEIGHT", defaults.default_height),
        default_gap=_env_int(environ, "GAP", defaults.default_gap),
        max_image_pixels=max_pixels,
        debug=environ.get(ENV_PREFIX + "DEBUG", "").lower() == "true",
        log_file=environ.get(ENV_PREFIX + "LOG_FILE") or None,
    )
