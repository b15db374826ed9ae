# test helpers

import numpy as np
from PIL import Image


def labelled_image(width, height, mode="RGB"):
    """Image whose pixels encode their own coordinates.

    R = x % 256, G = x // 256, B = y % 256 (alpha, if any, is opaque).
    """
    xs = np.arange(width, dtype=np.int64)
    ys = np.arange(height, dtype=np.int64)
    bands = 4 if mode == "RGBA" else 3
    pixels = np.full((height, width, bands), 255, dtype=np.uint8)
    pixels[:, :, 0] = (xs % 256)[np.newaxis, :]
    pixels[:, :, 1] = (xs // 256)[np.newaxis, :]
    pixels[:, :, 2] = (ys % 256)[:, np.newaxis]
    return Image.fromarray(pixels)


def source_column(image, x, y=0):
    r, g = image.getpixel((x, y))[:2]
    return g * 256 + r


def source_row(image, x, y):
    return image.getpixel((x, y))[2]
