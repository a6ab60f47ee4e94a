"""
Turns a pixel grid into a GLSL `vec4` array declaration.

Output layout (W = width, H = height):

    #version 420
    vec4 image[W][H] = {
        {vec4(r, g, b, a), vec4(r, g, b, a), ...},
        ...
        {vec4(r, g, b, a), ..., vec4(r, g, b, a)}
    };

The outer index is the image column (x) and the inner index the row (y), so
shaders read a texel as `image[x][y]`.
"""

# ==============================================================================
# 1. CONFIGURATION
# ==============================================================================
GLSL_VERSION = 420
ARRAY_NAME = "image"
PRECISION = 7  # digits after the decimal point

# 8-bit channel -> 0..1 scale
CHANNEL_SCALE = 1.0 / 255.0


# ==============================================================================
# 2. NUMBER FORMATTING
# ==============================================================================
def normalize(value):
    return CHANNEL_SCALE * value

def format_channel(value):
    return f"{normalize(value):.{PRECISION}f}"

def format_vec4(pixel):
    r, g, b, a = pixel
    return (
        f"vec4({format_channel(r)}, {format_channel(g)}, "
        f"{format_channel(b)}, {format_channel(a)})"
    )


# ==============================================================================
# 3. ARRAY SERIALIZER
# ==============================================================================
def serialize(width, height, pixel, progress=None):
    """
    Build the GLSL source for a `width` x `height` grid.

    `pixel(x, y)` must return an (r, g, b, a) tuple of 0..255 ints.
    `progress(done, total)` is called after every pixel when given.
    """
    total = width * height
    done = 0

    out = [f"#version {GLSL_VERSION}\n", f"vec4 {ARRAY_NAME}[{width}][{height}] = {{\n"]

    for x in range(width):
        out.append("\t{")
        for y in range(height):
            out.append(format_vec4(pixel(x, y)))
            out.append("}" if y + 1 == height else ", ")

            done += 1
            if progress is not None:
                progress(done, total)

        out.append("\n};" if x + 1 == width else ",\n")

    return "".join(out)

def serialize_image(image, progress=None):
    return serialize(image.width, image.height, image.pixel, progress)
