from __future__ import annotations

import imageio.v2 as imageio
import numpy as np
import pytest

from noisetrace.template import build_template


@pytest.fixture
def write_frames(tmp_path):
    """Write (H, W) uint8 arrays as template0001.png, template0002.png, ..."""

    def _write(frames, directory=None):
        directory = directory or tmp_path
        paths = []
        for idx, frame in enumerate(frames, start=1):
            path = directory / f"template{idx:04d}.png"
            imageio.imwrite(path, np.asarray(frame, dtype=np.uint8))
            paths.append(str(path))
        return paths

    return _write


@pytest.fixture
def make_template(write_frames):
    def _make(frames, upscale=1):
        return build_template(write_frames(frames), upscale)

    return _make
