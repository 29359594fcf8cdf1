"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the gradient magnitude of luminance (Avidan & Shamir 2007), with
forward/backward differences at the borders so the energy map has exactly
the same shape as the image.
"""

import torch

from .errors import EmptyImage

# BT.601 luma weights in (blue, green, red) order, same as OpenCV's BGR2GRAY
BGR_LUMA_WEIGHTS = (0.114, 0.587, 0.299)


def _check_image(image: torch.Tensor):
    if image.dim() not in (2, 3):
        raise EmptyImage(f"Expected an (H, W) or (C, H, W) tensor, got shape {tuple(image.shape)}")
    if image.shape[-1] == 0 or image.shape[-2] == 0:
        raise EmptyImage(f"Image has no pixels: shape {tuple(image.shape)}")


def to_grayscale(image: torch.Tensor) -> torch.Tensor:
    """
    Convert a BGR image to 8-bit luminance.

    Args:
        image: BGR image tensor (3, H, W) or grayscale (H, W)

    Returns:
        Grayscale tensor (H, W), dtype uint8
    """
    _check_image(image)

    if image.dim() == 2:
        return image

    if image.shape[0] == 1:
        return image[0]

    img = image.to(torch.float64)
    b_w, g_w, r_w = BGR_LUMA_WEIGHTS
    gray = b_w * img[0] + g_w * img[1] + r_w * img[2]
    return gray.round().clamp(0, 255).to(torch.uint8)


def _axis_gradient(gray: torch.Tensor, dim: int) -> torch.Tensor:
    """Central differences inside, one-sided differences at both ends."""
    n = gray.shape[dim]
    grad = torch.zeros_like(gray)
    if n == 1:
        return grad

    g = gray.movedim(dim, 0)
    out = grad.movedim(dim, 0)
    out[1:-1] = g[2:] - g[:-2]
    out[0] = g[1] - g[0]
    out[-1] = g[-1] - g[-2]
    return grad


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    E(x, y) = sqrt(gx^2 + gy^2) on the grayscale image, where gx and gy are
    central differences in the interior and forward/backward differences
    on the first/last column and row. A 1-pixel-wide axis contributes 0.

    Args:
        image: BGR image tensor (3, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W), dtype float64, non-negative
    """
    gray = to_grayscale(image).to(torch.float64)

    grad_x = _axis_gradient(gray, dim=1)
    grad_y = _axis_gradient(gray, dim=0)

    return torch.sqrt(grad_x ** 2 + grad_y ** 2)
