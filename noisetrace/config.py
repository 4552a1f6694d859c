"""Render configuration for noisetrace."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_FPS, DEFAULT_UPSCALE, DEFAULT_WINDOW
from .errors import InputError


@dataclass(frozen=True)
class RenderConfig:
    invert: bool = False
    upscale: int = DEFAULT_UPSCALE
    cutoff: Optional[int] = None
    loop: bool = True
    fps: int = DEFAULT_FPS
    window: int = DEFAULT_WINDOW
    seed: Optional[int] = None
    workers: Optional[int] = None

    def validate(self) -> "RenderConfig":
        """Raise InputError for values the renderer cannot honour."""
        if not 1 <= self.upscale <= 255:
            raise InputError(f"upscale must be in 1..255, got {self.upscale}")
        if self.cutoff is not None and not 0 <= self.cutoff <= 255:
            raise InputError(f"cutoff must be in 0..255, got {self.cutoff}")
        if self.window < 1:
            raise InputError(f"window must be >= 1, got {self.window}")
        if self.fps < 1:
            raise InputError(f"fps must be >= 1, got {self.fps}")
        if self.workers is not None and self.workers < 1:
            raise InputError(f"workers must be >= 1, got {self.workers}")
        return self

    @property
    def expands_mask(self) -> bool:
        return self.window > 1
