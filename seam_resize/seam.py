"""
Seam computation and removal.

Seams are found by dynamic programming over the cumulative energy field
(Avidan & Shamir 2007). Ties are broken deterministically so that the same
image always produces the same seam.
"""

import torch


def cumulative_energy(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum cumulative energy of any vertical seam ending at each pixel.

    M[0] = E[0]
    M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])

    Neighbours outside the image are ignored, so border cells take the
    minimum of two candidates.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative energy (H, W), dtype float64
    """
    cum = energy.to(torch.float64).clone()
    H, W = cum.shape

    for i in range(1, H):
        # Only row i-1 is read; row i is written once the minimum is built.
        prev = cum[i - 1]
        best = prev.clone()
        if W > 1:
            best[1:] = torch.minimum(best[1:], prev[:-1])
            best[:-1] = torch.minimum(best[:-1], prev[1:])
        cum[i] += best

    return cum


def _backtrack(cum: torch.Tensor) -> torch.Tensor:
    H, W = cum.shape
    seam = torch.zeros(H, dtype=torch.long)

    # argmin returns the first (leftmost) index among equal minima
    seam[H - 1] = torch.argmin(cum[H - 1])

    rows = cum.tolist()
    for i in range(H - 2, -1, -1):
        prev_col = seam[i + 1].item()
        row = rows[i]
        col = prev_col
        min_e = row[prev_col]

        # Strict comparisons in the order straight, left, right: straight
        # wins any tie and left wins a tie with right.
        if prev_col > 0 and row[prev_col - 1] < min_e:
            col = prev_col - 1
            min_e = row[prev_col - 1]
        if prev_col < W - 1 and row[prev_col + 1] < min_e:
            col = prev_col + 1

        seam[i] = col

    return seam


def dp_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Compute the minimum-energy seam by dynamic programming.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    if energy.dim() != 2 or energy.numel() == 0:
        raise ValueError(f"Expected a non-empty (H, W) energy map, got shape {tuple(energy.shape)}")

    if direction == 'vertical':
        return _backtrack(cumulative_energy(energy))
    elif direction == 'horizontal':
        return _backtrack(cumulative_energy(energy.t()))
    else:
        raise ValueError(f"Invalid direction: {direction}")


def remove_seam(image: torch.Tensor, seam: torch.Tensor,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    Pixels left of the seam keep their column, pixels right of it move one
    column to the left. Values are copied, never interpolated.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one column (vertical) or row (horizontal) removed
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    if direction == 'vertical':
        carved = _remove_vertical(image, seam)
    elif direction == 'horizontal':
        carved = _remove_vertical(image.transpose(1, 2), seam).transpose(1, 2).contiguous()
    else:
        raise ValueError(f"Invalid direction: {direction}")

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved


def _remove_vertical(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    C, H, W = image.shape
    seam = torch.as_tensor(seam, dtype=torch.long)

    if W < 2:
        raise ValueError(f"Cannot remove a seam from an image of width {W}")
    if seam.shape != (H,):
        raise ValueError(f"Seam has shape {tuple(seam.shape)}, expected ({H},)")
    if (seam < 0).any() or (seam >= W).any():
        raise ValueError(f"Seam entries must lie in [0, {W})")

    keep = torch.ones(H, W, dtype=torch.bool)
    keep[torch.arange(H), seam] = False

    # Boolean indexing walks rows in order, so each row stays compacted
    return image[:, keep].reshape(C, H, W - 1)
