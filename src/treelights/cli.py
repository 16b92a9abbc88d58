"""
CLI entry point for the tree light sequence generator.

Usage:
    treelights <effect> [coords.csv] [options]
    python -m treelights <effect> [coords.csv] [options]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from treelights.errors import TreeLightsError
from treelights.io.coords import load_points
from treelights.io.exporter import SequenceExporter
from treelights.preview.encoder import encode_video
from treelights.preview.playback import DEFAULT_FPS
from treelights.preview.render import PreviewConfig, TreePreviewRenderer
from treelights.registry import available_effects, get_effect
from treelights.sequence import SequenceConfig, SequenceGenerator

DEFAULT_COORDS = Path("coords/coords_2021.csv")


def _progress_bar(current: int, total: int, width: int = 35):
    """Print a progress bar to stderr (stdout may be carrying the CSV)."""
    pct = current / max(total, 1) * 100
    filled = int(width * current / max(total, 1))
    bar = "#" * filled + "-" * (width - filled)
    if sys.stderr.isatty():
        sys.stderr.write(f"\r[{bar}] {pct:5.1f}%  frame {current}/{total}")
        sys.stderr.flush()
        if current >= total:
            sys.stderr.write("\n")
    else:
        if current % max(1, total // 20) == 0 or current >= total:
            print(f"{pct:5.1f}%  frame {current}/{total}", file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treelights",
        description="Generates a christmas tree light sequence.",
    )

    parser.add_argument(
        "effect",
        nargs="?",
        help=f"Effect to render ({', '.join(available_effects())})",
    )
    parser.add_argument(
        "coords",
        nargs="?",
        type=Path,
        default=DEFAULT_COORDS,
        help=f"LED coordinate CSV (default: {DEFAULT_COORDS})",
    )
    parser.add_argument(
        "--len", dest="length", type=int, default=1000,
        help="Number of frames to generate (default: 1000)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output sequence CSV (default: stdout)",
    )
    parser.add_argument(
        "-j", "--workers", type=int, default=1,
        help="Threads used to compute frames (default: 1)",
    )
    parser.add_argument("--list", action="store_true", help="List available effects and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")

    # Preview
    parser.add_argument(
        "--preview", type=Path, default=None,
        help="Also render an MP4 preview of the sequence to this path",
    )
    parser.add_argument(
        "--preview-seconds", type=float, default=None,
        help="Preview length; the sequence loops to fill it (default: one pass)",
    )
    parser.add_argument("--width", type=int, default=540, help="Preview width (default: 540)")
    parser.add_argument("--height", type=int, default=720, help="Preview height (default: 720)")
    parser.add_argument(
        "-f", "--fps", type=float, default=DEFAULT_FPS,
        help=f"Preview frames per second (default: {DEFAULT_FPS})",
    )
    parser.add_argument(
        "-q", "--quality", type=str, default="medium",
        choices=["high", "medium", "fast"],
        help="Preview encoding quality (default: medium)",
    )
    parser.add_argument("--no-glow", action="store_true", help="Disable bulb glow in the preview")
    parser.add_argument("--no-vignette", action="store_true", help="Disable vignette in the preview")

    return parser


def _configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.list:
        for name in available_effects():
            print(name)
        return 0

    if args.effect is None:
        parser.error("the following arguments are required: effect")

    effect = get_effect(args.effect)
    if effect is None:
        print(f"Unknown effect: {args.effect}")
        return 0

    if not args.coords.exists():
        print(f"Error: Coordinate file not found: {args.coords}", file=sys.stderr)
        return 1

    exporter = SequenceExporter()
    try:
        points = load_points(args.coords)
        generator = SequenceGenerator(
            points,
            SequenceConfig(total_frames=args.length, workers=args.workers),
        )

        if args.preview is None and args.output is None:
            # Stream straight to stdout without holding the whole sequence.
            exporter.write_csv(generator.iter_frames(effect), sys.stdout)
            return 0

        t0 = time.time()
        sequence = generator.generate(effect, progress_callback=_progress_bar)
        print(
            f"Rendered {args.effect}: {len(sequence)} frames x {len(points)} LEDs "
            f"in {time.time() - t0:.1f}s",
            file=sys.stderr,
        )

        if args.output is not None:
            exporter.write_csv(sequence, args.output)
        else:
            exporter.write_csv(sequence, sys.stdout)

        if args.preview is not None:
            config = PreviewConfig(
                width=args.width,
                height=args.height,
                fps=args.fps,
                glow_enabled=not args.no_glow,
                vignette_strength=0.0 if args.no_vignette else 0.3,
            )
            renderer = TreePreviewRenderer(points, config)
            if args.preview_seconds is None:
                video_frames = len(sequence)
            else:
                video_frames = int(round(args.preview_seconds * config.fps))
            encode_video(
                frame_iterator=renderer.render_sequence(sequence, seconds=args.preview_seconds),
                output_path=args.preview,
                width=config.width,
                height=config.height,
                fps=config.fps,
                quality=args.quality,
                total_frames=video_frames,
                progress_callback=_progress_bar,
            )
            print(f"Preview: {args.preview}", file=sys.stderr)

    except TreeLightsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
