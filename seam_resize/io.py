"""
Image file loading and saving.

Images are decoded with Pillow and handed to the carving code as uint8
tensors of shape (3, H, W) in blue, green, red channel order.
"""

from pathlib import Path

import numpy as np
import torch
from PIL import Image

from .errors import ImageReadError, ImageWriteError


def load_image(path) -> torch.Tensor:
    """Load an image file as a BGR uint8 tensor (3, H, W)."""
    path = Path(path)
    try:
        with Image.open(path) as img:
            img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    except OSError as exc:
        # also covers UnidentifiedImageError
        raise ImageReadError(f"Could not read image {path}: {exc}") from exc

    # RGB (H, W, 3) -> BGR (3, H, W)
    bgr = np.ascontiguousarray(img_array[:, :, ::-1].transpose(2, 0, 1))
    return torch.from_numpy(bgr)


def save_image(image: torch.Tensor, path):
    """Save a BGR uint8 tensor (3, H, W), or grayscale (H, W), to path."""
    path = Path(path)
    img_array = image.detach().cpu().numpy()
    if img_array.ndim == 3:
        img_array = img_array[::-1].transpose(1, 2, 0)
    img_array = np.ascontiguousarray(img_array.clip(0, 255).astype(np.uint8))

    try:
        Image.fromarray(img_array).save(path)
    except (ValueError, KeyError, OSError) as exc:
        raise ImageWriteError(f"Could not save image {path}: {exc}") from exc
