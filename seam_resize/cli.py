"""
Command-line front end: seam carve an image file down to a new size.

    seam-resize photo.jpg
    Enter new width: 300
    Enter new height: 200

The result is written to resizeImg.jpeg in the current directory.
"""

import argparse
import logging
import sys
from typing import Optional

from .carving import CarvePhase, resize
from .errors import SeamCarvingError
from .io import load_image, save_image

DEFAULT_OUTPUT = 'resizeImg.jpeg'

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam-resize',
        description='Shrink an image with content-aware seam carving')
    parser.add_argument('image', help='path of the image to resize')
    parser.add_argument('--width', type=int, default=None,
                        help='target width (prompted for if omitted)')
    parser.add_argument('--height', type=int, default=None,
                        help='target height (prompted for if omitted)')
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT,
                        help=f'output path (default: {DEFAULT_OUTPUT})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log every removed seam')
    return parser


def prompt_dimension(label: str) -> int:
    """Read one integer dimension from stdin."""
    raw = input(f"Enter new {label}: ")
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{label} must be an integer, got {raw.strip()!r}") from None


def _report_progress(phase: CarvePhase, removed: int, total: int):
    if removed == total or removed % 20 == 0:
        print(f"  {phase.value}: removed {removed}/{total} seams")


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)-22s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        image = load_image(args.image)
        _, H, W = image.shape
        print(f"Loaded {args.image}: {W} x {H}")

        new_width = args.width if args.width is not None else prompt_dimension('width')
        new_height = args.height if args.height is not None else prompt_dimension('height')

        resized = resize(image, new_width, new_height, progress=_report_progress)
        save_image(resized, args.output)
    except (SeamCarvingError, ValueError, EOFError) as exc:
        logger.debug("Resize failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Saved: {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
