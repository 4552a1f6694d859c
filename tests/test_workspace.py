from __future__ import annotations

import shutil

import pytest

from noisetrace.errors import WorkspaceError
from noisetrace.workspace import RenderContext


def test_context_creates_and_removes(tmp_path):
    with RenderContext(base_dir=str(tmp_path)) as ctx:
        root = ctx.root
        assert root.is_dir()
        assert ctx.frames_dir.is_dir()
        assert ctx.template_pattern.endswith("template%04d.png")
        assert ctx.frame_pattern.endswith("frames/frame%04d.png")
        (ctx.frames_dir / "frame0000.png").write_bytes(b"x")
    assert not root.exists()
    assert ctx.root is None


def test_contexts_are_unique(tmp_path):
    with RenderContext(base_dir=str(tmp_path)) as a, RenderContext(base_dir=str(tmp_path)) as b:
        assert a.root != b.root


def test_removed_on_error(tmp_path):
    with pytest.raises(RuntimeError):
        with RenderContext(base_dir=str(tmp_path)) as ctx:
            root = ctx.root
            raise RuntimeError("boom")
    assert not root.exists()


def test_cleanup_failure_warns(tmp_path, monkeypatch):
    def failing_rmtree(path):  # noqa: ARG001
        raise PermissionError("denied")

    ctx = RenderContext(base_dir=str(tmp_path)).acquire()
    root = ctx.root
    monkeypatch.setattr("noisetrace.workspace.shutil.rmtree", failing_rmtree)
    with pytest.warns(UserWarning, match="Could not remove"):
        ctx.release()
    monkeypatch.undo()
    shutil.rmtree(root)


def test_cleanup_failure_does_not_mask_error(tmp_path, monkeypatch):
    def busy_rmtree(path):  # noqa: ARG001
        raise OSError("busy")

    monkeypatch.setattr("noisetrace.workspace.shutil.rmtree", busy_rmtree)
    with pytest.warns(UserWarning):
        with pytest.raises(KeyError):
            with RenderContext(base_dir=str(tmp_path)):
                raise KeyError("primary")


def test_missing_base_dir_raises(tmp_path):
    with pytest.raises(WorkspaceError):
        RenderContext(base_dir=str(tmp_path / "missing")).acquire()


def test_paths_require_acquire():
    with pytest.raises(WorkspaceError):
        RenderContext().frames_dir
