"""
Image loading for the GLSL exporter.

Opens an image with Pillow, lets Pillow sniff the format from the file
content, and decodes it into a read-only (height, width, 4) uint8 grid.
"""

import numpy as np
from PIL import Image

# ==============================================================================
# 1. ERRORS
# ==============================================================================
class InputError(Exception):
    pass


class DecodeError(InputError):
    """Input could not be opened, identified or decoded."""


# ==============================================================================
# 2. DECODED IMAGE
# ==============================================================================
class LoadedImage:
    def __init__(self, path, fmt, pixels):
        self.path = path
        self.format = fmt  # Pillow format name, e.g. "PNG" (None if unknown)
        self.pixels = pixels
        self.pixels.flags.writeable = False

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def mime_type(self):
        if self.format is None:
            return "Unknown"
        return Image.MIME.get(self.format, "Unknown")

    def pixel(self, x, y):
        # Grid is stored row-major (y first), callers address it as (x, y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width} x {self.height}")
        r, g, b, a = self.pixels[y, x]
        return (int(r), int(g), int(b), int(a))


# ==============================================================================
# 3. LOADER
# ==============================================================================
def to_8bit(img):
    """
    Scale single-channel high bit depth images down to mode "L".

    Pillow's own convert() clips 16-bit samples at 255 instead of scaling
    them, so 0..65535 integers keep their top byte and 0..1 floats are
    multiplied by 255.
    """
    if img.mode == "I" or img.mode.startswith("I;16"):
        data = np.clip(np.asarray(img, dtype=np.int64), 0, 0xFFFF) >> 8
    elif img.mode == "F":
        data = np.rint(np.clip(np.asarray(img, dtype=np.float64), 0.0, 1.0) * 255.0)
    else:
        return img
    return Image.fromarray(data.astype(np.uint8))


def load_image(path):
    """
    Decode `path` into a LoadedImage with RGBA channels.

    Raises DecodeError when the file is missing or unreadable, when Pillow
    cannot identify the format, or when the data is truncated/corrupt.
    """
    try:
        with Image.open(path) as img:
            # Format is only known on the opened file, not on the converted copy
            fmt = img.format
            rgba = to_8bit(img).convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(str(e)) from e

    pixels = np.array(rgba, dtype=np.uint8)
    if pixels.ndim != 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise DecodeError(f"{path}: image has no pixels")

    return LoadedImage(path, fmt, pixels)
