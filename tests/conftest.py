import logging

import pytest
from PIL import Image

from imagesizer.models.geometry import DisplayGeometry
from imagesizer.services.image_service import ImageService
from imagesizer.services.sizer_service import SizerService


@pytest.fixture(autouse=True)
def root_logger():
    """Puts back the root logger that `configure_logging` replaces."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sizer():
    return SizerService()


@pytest.fixture
def image_service():
    return ImageService()


@pytest.fixture
def geometry():
    return DisplayGeometry(width=20, height=10, gap_width=4)


@pytest.fixture
def write_image(tmp_path):
    def _write(name, size=(64, 32), mode="RGB", color=(200, 30, 90), format=None):
        path = tmp_path / name
        Image.new(mode, size, color).save(path, format=format)
        return path
    return _write
