"""
Exceptions raised by the seam carving engine and its I/O helpers.
"""


class SeamCarvingError(Exception):
    """Base class for every error raised by this package."""


class InvalidTarget(SeamCarvingError, ValueError):
    """Target dimensions cannot be reached by removing seams."""

    def __init__(self, target_width: int, target_height: int,
                 width: int, height: int, reason: str = ''):
        self.target_width = target_width
        self.target_height = target_height
        self.width = width
        self.height = height
        message = (f"Invalid target {target_width}x{target_height} "
                   f"for image of size {width}x{height}")
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyImage(SeamCarvingError, ValueError):
    """Image has zero width or height, or is not an (H, W) / (C, H, W) tensor."""


class ImageReadError(SeamCarvingError, FileNotFoundError):
    """Image file is missing or could not be decoded."""


class ImageWriteError(SeamCarvingError, OSError):
    """Image could not be encoded to the requested path."""
