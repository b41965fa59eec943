# colour_rank/cli.py
"""
colour_rank CLI.
Print the most frequent colours of an image (or every image in a folder).

Usage:
  python -m colour_rank INPUT --threads N --top K --offset O --scaling 1/4 [--merge lock|tree] [--no-swatch] [--debug]

Input:
  Any Pillow-readable image. Alpha is ignored. A folder processes every image in it, sorted by name.

Output:
  One line per colour: swatch, hex, rgb(), count. Then totals and the run time.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .config import EngineConfig
from .constants import (
    ALLOWED_SCALES,
    DEFAULT_MERGE,
    DEFAULT_OFFSET,
    DEFAULT_SCALE,
    DEFAULT_TOP_K,
    DEFAULT_WORKERS,
    IMAGE_EXTS,
    MERGE_STRATEGIES,
)
from .engine import build_histogram
from .errors import ColourRankError, SourceUnavailable
from .image_io import load_pixel_grid, scale_pixel_grid
from .rank import rank_colours
from .report import ranking_lines
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
)


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="colour_rank",
        description="Rank the most frequent colours in an image.",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--threads",
        type=int,
        default=DEFAULT_WORKERS,
        help="Worker threads counting pixels.",
    )
    parser.add_argument(
        "--top", type=int, default=DEFAULT_TOP_K, help="How many colours to print."
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=DEFAULT_OFFSET,
        help="Bucket width per channel to merge near-identical colours (0 = exact).",
    )
    parser.add_argument(
        "--scaling",
        default=DEFAULT_SCALE,
        help=f"Downscale before counting. One of: {', '.join(ALLOWED_SCALES)}",
    )
    parser.add_argument(
        "--merge",
        choices=list(MERGE_STRATEGIES),
        default=DEFAULT_MERGE,
        help="lock: fold into one shared histogram; tree: pairwise reduction.",
    )
    parser.add_argument(
        "--no-swatch", action="store_true", help="Plain text, no ANSI colour blocks."
    )
    parser.add_argument("--debug", action="store_true", help="Verbose engine details")
    return parser.parse_args(argv)


def _collect_inputs(src: Path) -> List[Path]:
    if not src.exists():
        raise SourceUnavailable(f"not found: {src}")
    if src.is_dir():
        files = [p for p in src.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTS]
        return sorted(files, key=lambda p: p.name.lower())
    return [src]


def _process_single_image(path: Path, cfg: EngineConfig, use_swatch: bool) -> None:
    t_start = time.perf_counter()
    print_banner(path.name)

    grid = load_pixel_grid(path)
    width0, height0 = grid.width, grid.height
    grid = scale_pixel_grid(grid, cfg.scale_denominator)
    if cfg.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width0}x{height0}"),
                    ("Scaled", f"{grid.width}x{grid.height}"),
                    ("Scaling", cfg.scale),
                ]
            )
        )

    log(f"Iterating over {grid.pixel_count:,} pixels")
    result = build_histogram(grid, cfg)
    entries = rank_colours(result.histogram, cfg.top_k)

    for line in ranking_lines(entries, use_swatch=use_swatch):
        log(line)
    log(
        key_value_pairs_to_string(
            [
                ("Counted", result.counted_pixels),
                ("Distinct", result.distinct_colours),
                ("Dropped", result.dropped_pixels),
            ]
        )
    )
    log(f"Total time {format_total_duration_compact(time.perf_counter() - t_start)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    try:
        cfg = EngineConfig(
            workers=args.threads,
            top_k=args.top,
            offset=args.offset,
            scale=args.scaling,
            merge=args.merge,
            debug=args.debug,
        ).validate()
        print_config_line(
            "run",
            [
                ("Workers", cfg.workers),
                ("Top-K", cfg.top_k),
                ("Offset", cfg.offset),
                ("Scaling", cfg.scale),
                ("Merge", cfg.merge),
            ],
            debug=False,
        )
        for path in _collect_inputs(args.src):
            _process_single_image(path, cfg, use_swatch=not args.no_swatch)
    except ColourRankError as e:
        error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
