"""Template frames: working resolution, loading and black-region expansion."""
from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .constants import BRIGHT_THRESHOLD, FRAME_FILE_EXTENSION, TEMPLATE_FILE_NAME
from .errors import InputError
from .utils import load_gray_frame, save_gray_frame


def round_to_even(num: int) -> int:
    return num if num % 2 == 0 else num - 1


@dataclass
class Template:
    size: tuple[int, int]
    frame_paths: list[str]
    upscale: int = 1
    original_size: tuple[int, int] = (0, 0)

    def __len__(self) -> int:
        return len(self.frame_paths)

    def load_frame(self, index: int) -> np.ndarray:
        """Decode template frame `index` at its native resolution."""
        return load_gray_frame(self.frame_paths[index])


def discover_frames(directory: str | Path) -> list[str]:
    pattern = f"{TEMPLATE_FILE_NAME}*.{FRAME_FILE_EXTENSION}"
    return sorted(str(p) for p in Path(directory).glob(pattern) if p.is_file())


def build_template(frame_paths: Iterable[str | Path], upscale: int = 1) -> Template:
    """
    Collect the decoded frames in temporal order and compute the working size.

    Frame files carry a zero-padded index so a lexicographic sort restores
    presentation order. Only the first frame is opened; the rest are assumed
    to share its dimensions.
    """
    paths = sorted(str(p) for p in frame_paths)
    if not paths:
        raise InputError("Source produced no frames")
    first = load_gray_frame(paths[0])
    height, width = first.shape
    size = (round_to_even(width * upscale), round_to_even(height * upscale))
    return Template(size=size, frame_paths=paths, upscale=upscale, original_size=(width, height))


def half_window(window: int) -> int:
    if window % 2 == 0:
        return window // 2
    return (window - 1) // 2


def _window_any(mask: np.ndarray, radius: int) -> np.ndarray:
    if radius == 0:
        return mask.copy()
    k = 2 * radius + 1
    # Edge padding repeats border samples, which matches clamping coordinates.
    padded = np.pad(mask, radius, mode="edge")
    rows = sliding_window_view(padded, k, axis=1).any(axis=-1)
    return sliding_window_view(rows, k, axis=0).any(axis=-1)


def expand_frame(frame: np.ndarray, window: int) -> np.ndarray:
    """
    Invert every pixel that has no sample above 127 inside its window.

    The neighbourhood is clamped to the image bounds. All decisions are taken
    on the input frame, which is left untouched; a new array is returned.
    """
    if frame.ndim != 2:
        raise ValueError("frame must have shape (H, W)")
    if window < 1:
        raise ValueError("window must be >= 1")
    frame = frame.astype(np.uint8, copy=False)
    if frame.size == 0:
        return frame.copy()
    has_bright = _window_any(frame > BRIGHT_THRESHOLD, half_window(window))
    return np.where(has_bright, frame, 255 - frame).astype(np.uint8)


def _expand_file(path: str, window: int) -> str:
    frame = load_gray_frame(path)
    save_gray_frame(expand_frame(frame, window), path)
    return path


def expand_black(template: Template, window: int, workers: Optional[int] = None) -> None:
    """Rewrite every template frame file through expand_frame, in parallel."""
    workers = workers or min(32, os.cpu_count() or 4)
    print(f"Expanding black regions by {window}px over {len(template)} frames using {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_expand_file, path, window) for path in template.frame_paths]
        for future in as_completed(futures):
            future.result()
