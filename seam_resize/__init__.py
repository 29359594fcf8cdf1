"""
Content-aware image resizing by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import (SeamCarvingError, InvalidTarget, EmptyImage,
                     ImageReadError, ImageWriteError)
from .energy import to_grayscale, gradient_magnitude_energy
from .seam import cumulative_energy, dp_seam, remove_seam
from .carving import CarvePhase, reduce_width, reduce_height, resize
from .io import load_image, save_image

__all__ = [
    'SeamCarvingError',
    'InvalidTarget',
    'EmptyImage',
    'ImageReadError',
    'ImageWriteError',
    'to_grayscale',
    'gradient_magnitude_energy',
    'cumulative_energy',
    'dp_seam',
    'remove_seam',
    'CarvePhase',
    'reduce_width',
    'reduce_height',
    'resize',
    'load_image',
    'save_image',
]
