"""Per-render temporary working directory."""
from __future__ import annotations

import shutil
import tempfile
import warnings
from pathlib import Path
from typing import Optional

from .constants import FRAME_DIR_NAME, FRAME_FILE_EXTENSION, FRAME_FILE_NAME, TEMPLATE_FILE_NAME
from .errors import WorkspaceError


class RenderContext:
    """
    Owns a uniquely named working directory for one render.

    Decoded template frames live at the root and synthesized frames under
    `frames/`. The directory is removed on every exit path; a failed removal
    only warns so it never hides the error that ended the render.
    """

    def __init__(self, base_dir: Optional[str] = None, prefix: str = "noise_"):
        self.base_dir = base_dir
        self.prefix = prefix
        self.root: Optional[Path] = None

    def acquire(self) -> "RenderContext":
        try:
            self.root = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.base_dir))
            self.frames_dir.mkdir()
        except OSError as exc:
            self.release()
            raise WorkspaceError(f"Could not create working directory: {exc}") from exc
        return self

    def release(self) -> None:
        if self.root is None:
            return
        root, self.root = self.root, None
        try:
            shutil.rmtree(root)
        except FileNotFoundError:
            pass
        except OSError as exc:
            warnings.warn(f"Could not remove working directory {root}: {exc}")

    def __enter__(self) -> "RenderContext":
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _require_root(self) -> Path:
        if self.root is None:
            raise WorkspaceError("Working directory has not been acquired")
        return self.root

    @property
    def template_dir(self) -> Path:
        return self._require_root()

    @property
    def frames_dir(self) -> Path:
        return self._require_root() / FRAME_DIR_NAME

    @property
    def template_pattern(self) -> str:
        return str(self.template_dir / f"{TEMPLATE_FILE_NAME}%04d.{FRAME_FILE_EXTENSION}")

    @property
    def frame_pattern(self) -> str:
        return str(self.frames_dir / f"{FRAME_FILE_NAME}%04d.{FRAME_FILE_EXTENSION}")
