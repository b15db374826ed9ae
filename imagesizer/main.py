"""Точка входа в приложение."""
import sys
from typing import Optional, Sequence

from imagesizer.app import EXIT_USAGE, ImageSizerApp, configure_logging
from imagesizer.cli.console import Console
from imagesizer.config import load_settings
from imagesizer.errors import ConfigurationError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Читает настройки окружения, разбирает аргументы и обрабатывает файлы."""
    if argv is None:
        argv = sys.argv[1:]
    console = Console()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        console.err.write(f"Configuration error: {exc}\n")
        return EXIT_USAGE
    configure_logging(settings)
    app = ImageSizerApp(settings=settings, console=console)
    return app.run(list(argv))


if __name__ == "__main__":
    sys.exit(main())
