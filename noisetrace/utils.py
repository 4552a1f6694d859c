"""Utility helpers for reading and writing grayscale still frames."""
from __future__ import annotations

import subprocess

import imageio.v2 as imageio
import numpy as np

from .errors import DecodeError


def _to_8bit(arr: np.ndarray) -> np.ndarray:
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.bool_:
        return arr.astype(np.uint8) * 255
    if np.issubdtype(arr.dtype, np.integer):
        # 16-bit samples (uint16, or int32 from some PNG decoders) keep their high byte.
        return (np.clip(arr, 0, 65535).astype(np.uint16) >> 8).astype(np.uint8)
    return np.clip(np.rint(arr), 0, 255).astype(np.uint8)


def _to_grayscale(frame: np.ndarray) -> np.ndarray:
    arr = _to_8bit(np.asarray(frame))
    if arr.ndim == 2:
        return arr
    if arr.ndim == 3 and arr.shape[2] == 1:
        return arr[..., 0]
    if arr.ndim == 3 and arr.shape[2] >= 3:
        rgb = arr[..., :3].astype(np.float32)
        gray = rgb @ np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)
        return np.clip(np.rint(gray), 0, 255).astype(np.uint8)
    raise ValueError(f"Unsupported frame shape for grayscale conversion: {arr.shape}")


def load_gray_frame(path: str) -> np.ndarray:
    """
    Load an image file as a (H, W) uint8 luminance array.
    """
    try:
        frame = imageio.imread(path)
    except Exception as exc:  # noqa: BLE001
        raise DecodeError(f"Could not decode frame {path}: {exc}") from exc
    try:
        return _to_grayscale(frame)
    except ValueError as exc:
        raise DecodeError(f"Could not decode frame {path}: {exc}") from exc


def save_gray_frame(frame: np.ndarray, path: str) -> None:
    """
    Save a (H, W) uint8 array as a lossless grayscale image.
    """
    if frame.ndim != 2:
        raise ValueError("frame must have shape (H, W)")
    imageio.imwrite(path, frame.astype(np.uint8, copy=False))


def run_cmd(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)


def stderr_tail(proc: subprocess.CompletedProcess, lines: int = 20) -> str:
    return "\n".join((proc.stderr or "").splitlines()[-lines:])
