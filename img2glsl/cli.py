import argparse
import sys

from .loader import InputError, load_image
from .serializer import GLSL_VERSION, serialize_image

# ==============================================================================
# 1. CONFIGURATION
# ==============================================================================
OUTPUT_FORMAT = "vec4[][], RGBA, 0..1 value range"
MIN_OPENGL = f"Core {GLSL_VERSION // 100}.{GLSL_VERSION // 10 % 10}"

# Print a progress line every N percent while converting
PROGRESS_STEP = 10


class OutputError(Exception):
    pass


# ==============================================================================
# 2. HELPERS
# ==============================================================================
class ProgressPrinter:
    def __init__(self, step=PROGRESS_STEP):
        self.step = step
        self.next_mark = step

    def __call__(self, done, total):
        percent = done * 100 // total
        if percent >= self.next_mark:
            print(f"  {percent:3d}% ({done} / {total} pixels)")
            # Skip marks already passed on tiny images
            self.next_mark = (percent // self.step + 1) * self.step


def write_output(path, text):
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise OutputError(str(e)) from e


def print_summary(image, output_path):
    print("Input file:")
    print(f"  - Path: {image.path}")
    print(f"  - Format: {image.mime_type}")
    print(f"  - Dimensions: {image.width} x {image.height}")
    print()
    print("Output file:")
    print(f"  - Path: {output_path}")
    print(f"  - Format: {OUTPUT_FORMAT}")
    print(f"  - Minimum OpenGL version: {MIN_OPENGL}")


# ==============================================================================
# 3. MAIN FLOW
# ==============================================================================
def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="img2glsl", description="Converts images to GLSL arrays")
    ap.add_argument("input", help="image file to convert")
    ap.add_argument("output", help="output file to write to")
    ap.add_argument("-q", "--quiet", action="store_true", help="only report the result")
    return ap.parse_args(argv)


def run(args):
    say = (lambda *a, **kw: None) if args.quiet else print

    say("Decoding image...")
    image = load_image(args.input)

    if not args.quiet:
        print_summary(image, args.output)

    say("\nConverting image...")
    progress = None if args.quiet else ProgressPrinter()
    text = serialize_image(image, progress)

    # Output is only touched once the whole buffer exists
    say("Writing output file...")
    write_output(args.output, text)


def main(argv=None):
    args = parse_args(argv)
    try:
        run(args)
    except (InputError, OutputError) as e:
        print(f"An error occurred:\n  {e}")
        return 1

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
