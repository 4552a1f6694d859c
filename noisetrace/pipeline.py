"""End-to-end render: video -> template frames -> noise frames -> video."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import numpy as np

from .config import RenderConfig
from .errors import EncodeError, InputError
from .media import compile_video, extract_frames
from .synth import FrameSynthesizer
from .template import build_template, expand_black
from .workspace import RenderContext


def render_video(
    input_path: str,
    output_path: str,
    config: Optional[RenderConfig] = None,
    rng: Optional[np.random.Generator] = None,
    base_dir: Optional[str] = None,
) -> bool:
    """
    Render a noise silhouette of `input_path` into `output_path`.

    Returns False when ffmpeg could not assemble the output video; every other
    failure raises. The working directory is removed in all cases.
    """
    config = (config or RenderConfig()).validate()
    source = Path(input_path).resolve()
    if not source.is_file():
        raise InputError(f"File {source} does not exist")
    target = Path(output_path).resolve()

    with RenderContext(base_dir=base_dir) as ctx:
        template = build_template(extract_frames(str(source), ctx), config.upscale)
        if config.expands_mask:
            expand_black(template, config.window, workers=config.workers)
        synth = FrameSynthesizer(template, config, rng=rng)
        count = synth.render(ctx.frames_dir)
        width, height = template.size
        print(f"Compiling {count} frames at {config.fps} fps, size {width}x{height}")
        try:
            compile_video(ctx.frame_pattern, str(target), config.fps)
        except EncodeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return False

    src_width, src_height = template.original_size
    print(
        f"Rendered {source} -> {target}. Frames={count}, Source={src_width}x{src_height}, Size={width}x{height}"
    )
    return True
