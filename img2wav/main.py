# main.py
"""
Command-line entry point: turn one image into a WAV file.

    img2wav picture.png            -> picture.wav
    img2wav picture.png -o out.wav --policy per-row

Exit code 0 on success, 1 on any usage, decode, grid or write error.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from img2wav.composer import convert_file
from img2wav.errors import Img2WavError, UsageError
from img2wav.synth.duration import (
    DEFAULT_POLICY,
    DEFAULT_ROW_SECONDS,
    DEFAULT_SECONDS_PER_SIDE,
    DEFAULT_TOTAL_SECONDS,
    POLICY_NAMES,
    get_policy,
)
from img2wav.synth.generator import METHODS
from img2wav.synth.params import MAX_FREQUENCY_HZ, MIN_FREQUENCY_HZ, OPACITY_FLOOR, SAMPLE_RATE_DEFAULT
from img2wav.synth.silence import SILENCE_THRESHOLD

IMAGE_PATTERN = re.compile(r".+\.(png|jpe?g|bmp|gif|tiff?|webp)$", re.IGNORECASE)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="img2wav",
        description="Turn an image into sound: columns are frequencies, brightness is loudness.",
    )
    parser.add_argument("image", help="Input image (png, jpg, bmp, gif, tiff, webp)")
    parser.add_argument("-o", "--output", help="Output WAV path (default: image path with .wav)")
    parser.add_argument("--policy", choices=POLICY_NAMES, default=DEFAULT_POLICY,
                        help=f"Duration policy (default: {DEFAULT_POLICY})")
    parser.add_argument("--duration", type=float, default=DEFAULT_TOTAL_SECONDS,
                        help=f"Total seconds for fixed-total (default: {DEFAULT_TOTAL_SECONDS})")
    parser.add_argument("--row-duration", type=float, default=DEFAULT_ROW_SECONDS,
                        help=f"Seconds per row for per-row (default: {DEFAULT_ROW_SECONDS})")
    parser.add_argument("--scale", type=float, default=DEFAULT_SECONDS_PER_SIDE,
                        help=f"Seconds per sqrt(pixel) for size-heuristic (default: {DEFAULT_SECONDS_PER_SIDE})")
    parser.add_argument("--sample-rate", type=int, default=SAMPLE_RATE_DEFAULT)
    parser.add_argument("--min-freq", type=float, default=MIN_FREQUENCY_HZ)
    parser.add_argument("--max-freq", type=float, default=MAX_FREQUENCY_HZ)
    parser.add_argument("--threshold", type=int, default=SILENCE_THRESHOLD,
                        help=f"Silence trim threshold out of 32767 (default: {SILENCE_THRESHOLD})")
    parser.add_argument("--opacity-floor", type=float, default=OPACITY_FLOOR)
    parser.add_argument("--workers", type=int, default=1, help="Processes for row rendering")
    parser.add_argument("--method", choices=METHODS, default="direct")
    parser.add_argument("--max-size", type=int, default=None,
                        help="Downscale so neither side exceeds this many pixels")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _policy_from_args(args):
    if args.policy == "fixed-total":
        return get_policy(args.policy, seconds=args.duration)
    if args.policy == "size-heuristic":
        return get_policy(args.policy, seconds_per_side=args.scale)
    return get_policy(args.policy, row_seconds=args.row_duration)


def run(argv=None) -> Path:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    if not IMAGE_PATTERN.match(Path(args.image).name):
        raise UsageError(f"Not an accepted image file name: {args.image}")
    try:
        policy = _policy_from_args(args)
        print(f"Composing from: {args.image}")
        out_path = convert_file(
            args.image,
            args.output,
            policy=policy,
            sample_rate=args.sample_rate,
            min_frequency=args.min_freq,
            max_frequency=args.max_freq,
            threshold=args.threshold,
            opacity_floor=args.opacity_floor,
            workers=args.workers,
            method=args.method,
            max_size=args.max_size,
        )
    except Img2WavError:
        raise
    except ValueError as e:
        # bad option values (frequencies, durations, workers)
        raise UsageError(str(e)) from e

    print(f"Done. Wrote {out_path}")
    return out_path


def main(argv=None) -> int:
    try:
        run(argv)
    except Img2WavError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
