"""noisetrace: trace a video with a persistent field of flickering binary noise."""
from .config import RenderConfig
from .constants import (
    BRIGHT_THRESHOLD,
    DEFAULT_FPS,
    DEFAULT_UPSCALE,
    DEFAULT_WINDOW,
    PIXEL_OFF,
    PIXEL_ON,
)
from .errors import DecodeError, EncodeError, InputError, NoiseTraceError, WorkspaceError
from .noise import HardCutoff, NoiseField, Probabilistic, make_flip_policy
from .pipeline import render_video
from .synth import FrameSynthesizer, frame_schedule
from .template import Template, build_template, expand_black, expand_frame, round_to_even
from .version import __version__, get_version_string
from .workspace import RenderContext

__all__ = [
    "BRIGHT_THRESHOLD",
    "DEFAULT_FPS",
    "DEFAULT_UPSCALE",
    "DEFAULT_WINDOW",
    "PIXEL_OFF",
    "PIXEL_ON",
    "RenderConfig",
    "NoiseTraceError",
    "InputError",
    "DecodeError",
    "WorkspaceError",
    "EncodeError",
    "NoiseField",
    "HardCutoff",
    "Probabilistic",
    "make_flip_policy",
    "Template",
    "build_template",
    "expand_black",
    "expand_frame",
    "round_to_even",
    "FrameSynthesizer",
    "frame_schedule",
    "RenderContext",
    "render_video",
    "get_version_string",
    "__version__",
]
