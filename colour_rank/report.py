# colour_rank/report.py
from __future__ import annotations

"""
Text rendering of a ranking: 24-bit ANSI swatch, hex, rgb(), count.
"""

from typing import List, Sequence

from .core_types import RankedEntry, RGBTuple

RESET = "\033[0m"


def swatch(rgb: RGBTuple, width: int = 4) -> str:
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{RESET}"


def format_entry(entry: RankedEntry, *, use_swatch: bool = True, rank: int = 0) -> str:
    r, g, b = entry.colour
    parts = []
    if rank:
        parts.append(f"{rank:>3}.")
    if use_swatch:
        parts.append(swatch(entry.colour))
    parts.append(entry.hex)
    parts.append(f"rgb({r}, {g}, {b})")
    parts.append(f"{entry.count:,} times")
    return "  ".join(parts)


def ranking_lines(
    entries: Sequence[RankedEntry], *, use_swatch: bool = True
) -> List[str]:
    return [
        format_entry(e, use_swatch=use_swatch, rank=i)
        for i, e in enumerate(entries, start=1)
    ]


__all__ = ["swatch", "format_entry", "ranking_lines"]
