"""
High-level carving functions that orchestrate the seam carving loop.

Every iteration recomputes energy on the current image, finds one vertical
seam and removes it. Height is reduced by running the same loop on the
transposed image.
"""

import enum
import logging
from typing import Callable, Optional

import torch

from .energy import gradient_magnitude_energy
from .errors import EmptyImage, InvalidTarget
from .seam import dp_seam, remove_seam

logger = logging.getLogger(__name__)


class CarvePhase(enum.Enum):
    REDUCING_WIDTH = 'reducing_width'
    REDUCING_HEIGHT = 'reducing_height'
    DONE = 'done'


# progress(phase, seams_removed, seams_total)
ProgressCallback = Callable[[CarvePhase, int, int], None]


def _image_size(image: torch.Tensor):
    if image.dim() not in (2, 3):
        raise EmptyImage(f"Expected an (H, W) or (C, H, W) tensor, got shape {tuple(image.shape)}")
    H, W = image.shape[-2], image.shape[-1]
    if H == 0 or W == 0:
        raise EmptyImage(f"Image has no pixels: shape {tuple(image.shape)}")
    return W, H


def _carve_columns(image: torch.Tensor, target_width: int, phase: CarvePhase,
                   progress: Optional[ProgressCallback]) -> torch.Tensor:
    carved = image
    n_seams = carved.shape[-1] - target_width

    for i in range(n_seams):
        energy = gradient_magnitude_energy(carved)
        seam = dp_seam(energy, direction='vertical')
        carved = remove_seam(carved, seam, direction='vertical')
        logger.debug("%s: removed seam %d/%d, width now %d",
                     phase.value, i + 1, n_seams, carved.shape[-1])
        if progress is not None:
            progress(phase, i + 1, n_seams)

    return carved


def reduce_width(image: torch.Tensor, target_width: int,
                 progress: Optional[ProgressCallback] = None) -> torch.Tensor:
    """
    Remove vertical seams until the image is target_width columns wide.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        target_width: Desired width, 1 <= target_width <= W
        progress: Optional callback invoked after every seam

    Returns:
        Carved image (C, H, target_width)
    """
    W, H = _image_size(image)
    if target_width < 1 or target_width > W:
        raise InvalidTarget(target_width, H, W, H,
                            f"width must be between 1 and {W}")

    if target_width < W:
        logger.info("Reducing width %d -> %d", W, target_width)
    return _carve_columns(image, target_width, CarvePhase.REDUCING_WIDTH, progress)


def reduce_height(image: torch.Tensor, target_height: int,
                  progress: Optional[ProgressCallback] = None) -> torch.Tensor:
    """
    Remove horizontal seams until the image is target_height rows tall.

    The image is transposed once, carved column-wise and transposed back.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        target_height: Desired height, 1 <= target_height <= H
        progress: Optional callback invoked after every seam

    Returns:
        Carved image (C, target_height, W)
    """
    W, H = _image_size(image)
    if target_height < 1 or target_height > H:
        raise InvalidTarget(W, target_height, W, H,
                            f"height must be between 1 and {H}")
    if target_height == H:
        return image

    logger.info("Reducing height %d -> %d", H, target_height)
    transposed = image.transpose(-2, -1).contiguous()
    carved = _carve_columns(transposed, target_height, CarvePhase.REDUCING_HEIGHT, progress)
    return carved.transpose(-2, -1).contiguous()


def initial_phase(width: int, height: int,
                  target_width: int, target_height: int) -> CarvePhase:
    """Phase the driver starts in for the given current and target sizes."""
    if target_width < width:
        return CarvePhase.REDUCING_WIDTH
    if target_height < height:
        return CarvePhase.REDUCING_HEIGHT
    return CarvePhase.DONE


def resize(image: torch.Tensor, target_width: int, target_height: int,
           strict: bool = True,
           progress: Optional[ProgressCallback] = None) -> torch.Tensor:
    """
    Content-aware resize by removing vertical, then horizontal seams.

    Args:
        image: BGR image tensor (3, H, W), or grayscale (H, W)
        target_width: Output width
        target_height: Output height
        strict: If True, both targets must be strictly smaller than the
                current size. If False, a target equal to the current size
                skips that axis.
        progress: Optional callback progress(phase, removed, total) called
                  after every seam. Raising from it aborts the resize.

    Returns:
        Carved image of size target_width x target_height

    Raises:
        EmptyImage: the image has no pixels
        InvalidTarget: the targets cannot be reached by seam removal
    """
    W, H = _image_size(image)

    if target_width < 1 or target_height < 1:
        raise InvalidTarget(target_width, target_height, W, H,
                            "dimensions must be at least 1")
    if strict and (target_width >= W or target_height >= H):
        raise InvalidTarget(target_width, target_height, W, H,
                            "both dimensions must be strictly smaller")
    if target_width > W or target_height > H:
        raise InvalidTarget(target_width, target_height, W, H,
                            "seam carving cannot enlarge an image")

    phase = initial_phase(W, H, target_width, target_height)
    carved = image

    if phase == CarvePhase.REDUCING_WIDTH:
        carved = reduce_width(carved, target_width, progress=progress)
        phase = initial_phase(target_width, H, target_width, target_height)

    if phase == CarvePhase.REDUCING_HEIGHT:
        carved = reduce_height(carved, target_height, progress=progress)

    logger.info("Resized %dx%d -> %dx%d", W, H, carved.shape[-1], carved.shape[-2])
    return carved
