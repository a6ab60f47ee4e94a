import pytest
from PIL import Image


@pytest.fixture
def make_png(tmp_path):
    """Write an RGBA png from a {(x, y): (r, g, b, a)} map and return its path."""
    def _make(width, height, pixels=None, name="input.png", fill=(0, 0, 0, 255)):
        img = Image.new("RGBA", (width, height), fill)
        for (x, y), color in (pixels or {}).items():
            img.putpixel((x, y), color)
        path = tmp_path / name
        img.save(path)
        return path
    return _make
