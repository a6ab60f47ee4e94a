"""Convert raster images into GLSL vec4 array declarations."""

from .loader import DecodeError, InputError, LoadedImage, load_image
from .serializer import serialize, serialize_image

__version__ = "0.1.0"
