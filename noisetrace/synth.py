"""Frame synthesis: drive the persistent noise field across the template frames."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import numpy as np

from .config import RenderConfig
from .constants import FRAME_FILE_EXTENSION, FRAME_FILE_NAME
from .noise import NoiseField, make_flip_policy
from .template import Template
from .utils import save_gray_frame


def frame_file_name(frame: int) -> str:
    return f"{FRAME_FILE_NAME}{frame:04d}.{FRAME_FILE_EXTENSION}"


def frame_schedule(num_frames: int, loop: bool = True) -> list[int]:
    """
    Template index for each output frame.

    Looping repeats the forward pass once ([0..N-1, 0..N-1]) rather than
    playing it back in reverse.
    """
    passes = 2 if loop else 1
    return [idx for _ in range(passes) for idx in range(num_frames)]


def sample_template(frame: np.ndarray, size: tuple[int, int], upscale: int) -> np.ndarray:
    """Nearest-neighbour map of a (height, width) noise grid onto `frame`."""
    width, height = size
    ys = np.arange(height) // upscale
    xs = np.arange(width) // upscale
    return frame[np.ix_(ys, xs)]


class FrameSynthesizer:
    def __init__(
        self,
        template: Template,
        config: RenderConfig,
        rng: Optional[np.random.Generator] = None,
        field: Optional[NoiseField] = None,
    ):
        self.template = template
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.policy = make_flip_policy(config.cutoff, config.invert)
        width, height = template.size
        if field is None:
            field = NoiseField.random(width, height, self.rng)
        elif (field.width, field.height) != (width, height):
            raise ValueError(
                f"Noise field is {field.width}x{field.height}, template needs {width}x{height}"
            )
        self.field = field

    @property
    def schedule(self) -> list[int]:
        return frame_schedule(len(self.template), self.config.loop)

    def step(self, template_frame: np.ndarray) -> np.ndarray:
        """Apply one full pass of flip decisions and return the emitted frame."""
        values = sample_template(template_frame, self.template.size, self.template.upscale)
        flips = self.policy.decide(values, self.rng)
        self.field.invert(flips)
        return self.field.snapshot()

    def frames(self) -> Iterator[tuple[int, np.ndarray]]:
        for out_idx, tpl_idx in enumerate(self.schedule):
            yield out_idx, self.step(self.template.load_frame(tpl_idx))

    def render(self, frames_dir: str | Path) -> int:
        frames_dir = Path(frames_dir)
        frames_dir.mkdir(parents=True, exist_ok=True)
        width, height = self.template.size
        print(f"Rendering noise field {width}x{height} over {len(self.schedule)} frames")
        count = 0
        for out_idx, snapshot in self.frames():
            save_gray_frame(snapshot, str(frames_dir / frame_file_name(out_idx)))
            count += 1
        return count
