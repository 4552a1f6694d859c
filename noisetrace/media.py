"""ffmpeg wrappers that split a video into frames and assemble frames into a video."""
from __future__ import annotations

import sys

from .errors import EncodeError, InputError
from .template import discover_frames
from .utils import run_cmd, stderr_tail
from .workspace import RenderContext


def extract_frames(input_path: str, ctx: RenderContext) -> list[str]:
    """Decode `input_path` into 1-indexed 8-bit gray template frames, padded to even dimensions."""
    cmd = [
        "ffmpeg",
        "-hide_banner",
        "-i",
        str(input_path),
        "-vf",
        "pad=ceil(iw/2)*2:ceil(ih/2)*2",
        "-pix_fmt",
        "gray",
        ctx.template_pattern,
    ]
    try:
        proc = run_cmd(cmd)
    except FileNotFoundError as exc:
        raise InputError("ffmpeg not found on PATH") from exc
    if proc.returncode != 0:
        raise InputError(f"ffmpeg could not decode {input_path}:\n{stderr_tail(proc)}")
    return discover_frames(ctx.template_dir)


def compile_video(frame_pattern: str, output_path: str, fps: int) -> None:
    cmd = [
        "ffmpeg",
        "-y",
        "-hide_banner",
        "-framerate",
        str(fps),
        "-i",
        frame_pattern,
        "-c:v",
        "libx264",
        "-pix_fmt",
        "yuv420p",
        str(output_path),
    ]
    try:
        proc = run_cmd(cmd)
    except OSError as exc:
        raise EncodeError(f"ffmpeg build video failed: {exc}") from exc
    if proc.returncode != 0:
        print(f"ffmpeg build video output:\n{proc.stdout}\nstderr:\n{proc.stderr}", file=sys.stderr)
        raise EncodeError(f"ffmpeg exited with status {proc.returncode} while writing {output_path}")
