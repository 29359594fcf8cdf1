"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_constant_image(H, W, value=128):
    """BGR uint8 image with every channel set to value."""
    return torch.full((3, H, W), value, dtype=torch.uint8)


def make_column_image(H, W, bright_col):
    """Black image with a single white column."""
    img = torch.zeros(3, H, W, dtype=torch.uint8)
    img[:, :, bright_col] = 255
    return img


def make_ramp_image(H, W, step=50):
    """Gray ramp: pixel (x, y) has value step * x on every channel."""
    ramp = (torch.arange(W) * step).to(torch.uint8)
    return ramp.view(1, 1, W).expand(3, H, W).clone()


def make_indexed_image(H, W):
    """Image whose pixels are all distinct, so moved pixels can be traced."""
    idx = torch.arange(H * W).view(H, W)
    return torch.stack([idx % 256, (idx // 256) % 256, (idx * 7) % 256]).to(torch.uint8)


@pytest.fixture
def random_image():
    """Seeded random 20x30 BGR image."""
    gen = torch.Generator().manual_seed(42)
    return torch.randint(0, 256, (3, 20, 30), generator=gen, dtype=torch.uint8)
