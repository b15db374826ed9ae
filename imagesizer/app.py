import logging
from typing import Optional, Sequence

from PIL import Image

from imagesizer.cli.arguments import resolve_args, usage_text
from imagesizer.cli.console import Console
from imagesizer.config import Settings, load_settings
from imagesizer.controllers.batch_controller import BatchController
from imagesizer.errors import ConfigurationError, ConstructionError

log = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_USAGE = 2


def configure_logging(settings: Settings) -> None:
    # progress lines go to stdout; the log stays quiet unless asked for
    level = logging.DEBUG if settings.debug else logging.WARNING
    if settings.log_file:
        logging.basicConfig(
            level=level,
            filename=settings.log_file,
            filemode="w",
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            force=True,
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT, force=True)


class ImageSizerApp:
    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None) -> None:
        self.settings = settings if settings is not None else load_settings()
        self.console = console if console is not None else Console()
        Image.MAX_IMAGE_PIXELS = self.settings.max_image_pixels

    def run(self, argv: Sequence[str]) -> int:
        if not argv:
            self.console.usage(usage_text(self.settings))
            return EXIT_OK

        try:
            args = resolve_args(argv, self.settings)
            if args.show_help:
                self.console.usage(usage_text(self.settings))
                return EXIT_OK
            geometry = args.geometry()
        except (ConfigurationError, ConstructionError) as exc:
            log.debug("invalid arguments %r", list(argv), exc_info=True)
            self.console.parse_error(str(exc), usage_text(self.settings))
            return EXIT_USAGE

        log.debug("geometry %s, %d file(s)", geometry, len(args.jobs))
        controller = BatchController(geometry=geometry, console=self.console)
        report = controller.run(args.jobs)
        return EXIT_OK if report.ok else EXIT_FILE_ERRORS
