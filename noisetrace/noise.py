"""Persistent binary noise field and the per-pixel flip rules that drive it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .constants import FLIP_EXPONENT, PIXEL_OFF, PIXEL_ON


class NoiseField:
    """
    A (height, width) uint8 buffer whose pixels are always 0 or 255.

    The same buffer lives for a whole render; every inversion persists into
    the following frames.
    """

    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 2:
            raise ValueError("pixels must have shape (H, W)")
        self.pixels = pixels.astype(np.uint8, copy=False)

    @classmethod
    def random(cls, width: int, height: int, rng: np.random.Generator) -> "NoiseField":
        coin = rng.integers(0, 2, size=(height, width), dtype=np.uint8).astype(bool)
        return cls(np.where(coin, PIXEL_ON, PIXEL_OFF).astype(np.uint8))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def invert(self, mask: np.ndarray) -> None:
        if mask.shape != self.pixels.shape:
            raise ValueError(f"Shape mismatch: {mask.shape} vs {self.pixels.shape}")
        np.subtract(PIXEL_ON, self.pixels, out=self.pixels, where=mask)

    def snapshot(self) -> np.ndarray:
        return self.pixels.copy()


@dataclass(frozen=True)
class HardCutoff:
    threshold: int
    invert: bool = False

    def decide(self, values: np.ndarray, rng: Optional[np.random.Generator] = None) -> np.ndarray:  # noqa: ARG002
        values = np.asarray(values)
        if self.invert:
            return values > self.threshold
        return values < self.threshold


@dataclass(frozen=True)
class Probabilistic:
    invert: bool = False

    def probability(self, values: np.ndarray) -> np.ndarray:
        """p = (base / 255) ** 3, base being v when inverted and 255 - v otherwise."""
        values = np.asarray(values, dtype=np.float64)
        base = values if self.invert else 255.0 - values
        return (base / 255.0) ** FLIP_EXPONENT

    def decide(self, values: np.ndarray, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        if rng is None:
            raise ValueError("Probabilistic flips need a random generator")
        p = self.probability(values)
        # random() draws from [0, 1): p == 0 never flips, p == 1 always does.
        return rng.random(p.shape) < p


FlipPolicy = Union[HardCutoff, Probabilistic]


def make_flip_policy(cutoff: Optional[int], invert: bool) -> FlipPolicy:
    if cutoff is not None:
        return HardCutoff(threshold=int(cutoff), invert=invert)
    return Probabilistic(invert=invert)
