"""Exception hierarchy for noisetrace renders."""
from __future__ import annotations


class NoiseTraceError(Exception):
    """Base class for every failure raised by noisetrace."""


class InputError(NoiseTraceError, ValueError):
    """Missing or unreadable input, empty frame sequence or bad configuration."""


class DecodeError(NoiseTraceError):
    """A frame file could not be parsed as an image."""


class WorkspaceError(NoiseTraceError, OSError):
    """The temporary working directory could not be created."""


class EncodeError(NoiseTraceError):
    """ffmpeg failed to assemble the rendered frames into a video."""
