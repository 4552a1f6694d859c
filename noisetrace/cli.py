"""Command-line entrypoint for noisetrace."""
from __future__ import annotations

import argparse
import sys

from .config import RenderConfig
from .constants import DEFAULT_FPS, DEFAULT_UPSCALE, DEFAULT_WINDOW
from .errors import NoiseTraceError
from .pipeline import render_video
from .version import get_version_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noisetrace", description="Trace a video with a persistent field of flickering binary noise"
    )
    parser.add_argument("--version", action="version", version=get_version_string())
    parser.add_argument("-i", "--input", required=True, help="Input video path")
    parser.add_argument("-o", "--output", required=True, help="Output video path")
    parser.add_argument(
        "-w", "--window", type=int, default=DEFAULT_WINDOW, help="Black-region expansion window; >1 enables it"
    )
    parser.add_argument("--noloop", action="store_true", help="Play the template once instead of twice")
    parser.add_argument("--invert", action="store_true", help="Flip bright regions instead of dark ones")
    parser.add_argument(
        "--upscale", type=int, default=DEFAULT_UPSCALE, help="Noise resolution multiplier (1..255)"
    )
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Output frames per second")
    parser.add_argument(
        "--cutoff", type=int, default=None, help="Deterministic luminance threshold (0..255) instead of random flips"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible noise")
    parser.add_argument("--workers", type=int, default=None, help="Threads used for black-region expansion")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        invert=args.invert,
        upscale=args.upscale,
        cutoff=args.cutoff,
        loop=not args.noloop,
        fps=args.fps,
        window=args.window,
        seed=args.seed,
        workers=args.workers,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        ok = render_video(args.input, args.output, config_from_args(args))
    except NoiseTraceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
