from __future__ import annotations

import imageio.v2 as imageio
import numpy as np
import pytest

from noisetrace.config import RenderConfig
from noisetrace.errors import EncodeError, InputError
from noisetrace.pipeline import render_video
from noisetrace.template import discover_frames
from noisetrace.utils import load_gray_frame


@pytest.fixture
def fake_media(monkeypatch, tmp_path):
    captured: dict = {}
    frames = [np.zeros((4, 4), dtype=np.uint8), np.zeros((4, 4), dtype=np.uint8)]

    def fake_extract(input_path, ctx):  # noqa: ARG001
        captured["workdir"] = ctx.root
        for idx, frame in enumerate(frames, start=1):
            imageio.imwrite(ctx.template_dir / f"template{idx:04d}.png", frame)
        return discover_frames(ctx.template_dir)

    def fake_compile(frame_pattern, output_path, fps):
        frames_dir = captured["workdir"] / "frames"
        captured["frames"] = [load_gray_frame(str(p)) for p in sorted(frames_dir.iterdir())]
        captured["pattern"] = frame_pattern
        captured["output"] = output_path
        captured["fps"] = fps
        if captured.get("fail"):
            raise EncodeError("encoder exploded")

    monkeypatch.setattr("noisetrace.pipeline.extract_frames", fake_extract)
    monkeypatch.setattr("noisetrace.pipeline.compile_video", fake_compile)
    source = tmp_path / "input.mp4"
    source.write_bytes(b"video")
    captured["source"] = source
    return captured


def test_render_video_end_to_end(fake_media, tmp_path, capsys):
    config = RenderConfig(cutoff=1, loop=False, fps=12)
    rng = np.random.default_rng(9)
    initial = np.random.default_rng(9).integers(0, 2, size=(4, 4), dtype=np.uint8).astype(bool)

    ok = render_video(str(fake_media["source"]), str(tmp_path / "out.mp4"), config, rng=rng, base_dir=str(tmp_path))

    assert ok
    assert fake_media["fps"] == 12
    assert fake_media["pattern"].endswith("frame%04d.png")
    out = fake_media["frames"]
    assert len(out) == 2
    assert np.array_equal(out[0] == 255, ~initial)
    assert np.array_equal(out[1] == 255, initial)
    assert not fake_media["workdir"].exists()
    assert "Source=4x4, Size=4x4" in capsys.readouterr().out


def test_render_video_with_expansion_and_loop(fake_media, tmp_path):
    config = RenderConfig(window=3, seed=4)
    assert render_video(str(fake_media["source"]), str(tmp_path / "out.mp4"), config, base_dir=str(tmp_path))
    # all-black frames invert to white, which never flips in random mode
    frames = fake_media["frames"]
    assert len(frames) == 4
    for frame in frames[1:]:
        assert np.array_equal(frame, frames[0])


def test_encode_failure_reported(fake_media, tmp_path, capsys):
    fake_media["fail"] = True
    ok = render_video(str(fake_media["source"]), str(tmp_path / "out.mp4"), RenderConfig(), base_dir=str(tmp_path))
    assert not ok
    assert "encoder exploded" in capsys.readouterr().err
    assert not fake_media["workdir"].exists()


def test_missing_input(tmp_path):
    with pytest.raises(InputError):
        render_video(str(tmp_path / "nope.mp4"), str(tmp_path / "out.mp4"))


@pytest.mark.parametrize(
    "config",
    [RenderConfig(upscale=0), RenderConfig(upscale=256), RenderConfig(cutoff=300), RenderConfig(window=0), RenderConfig(fps=0)],
)
def test_invalid_config_rejected_before_work(fake_media, tmp_path, config):
    with pytest.raises(InputError):
        render_video(str(fake_media["source"]), str(tmp_path / "out.mp4"), config, base_dir=str(tmp_path))
    assert "workdir" not in fake_media
