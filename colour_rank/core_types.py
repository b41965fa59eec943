# colour_rank/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import OutOfBounds

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)

ColourKey = RGBTuple  # canonical histogram bucket, ordered lexicographically
LocalHistogram = Dict[ColourKey, int]

# Value objects


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Read-only view over a decoded (H, W, 3) uint8 image."""

    rgb: U8Image

    def __post_init__(self) -> None:
        arr = assert_u8_image_rgb(np.asarray(self.rgb))
        arr = np.ascontiguousarray(arr[..., :3])
        arr.flags.writeable = False
        object.__setattr__(self, "rgb", arr)

    @property
    def width(self) -> int:
        return int(self.rgb.shape[1])

    @property
    def height(self) -> int:
        return int(self.rgb.shape[0])

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def at(self, x: int, y: int) -> RGBTuple:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} grid",
                x=x,
                y=y,
                width=self.width,
                height=self.height,
            )
        return coerce_to_rgb_tuple(self.rgb[y, x])


@dataclass(frozen=True)
class RankedEntry:
    """One ranked colour and how many pixels carry it."""

    colour: ColourKey
    count: int

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.colour)


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3-length sequence or array to an (int, int, int) RGB tuple.
    Helpful when extracting values from NumPy rows.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        return (int(value[..., 0]), int(value[..., 1]), int(value[..., 2]))
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) image and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] < 3:
        raise TypeError("expected uint8 (H,W,3/4) image")
    return image  # type: ignore[return-value]


__all__ = [
    "RGBTuple",
    "HexStr",
    "U8Image",
    "ColourKey",
    "LocalHistogram",
    "PixelGrid",
    "RankedEntry",
    "rgb_to_hex",
    "coerce_to_rgb_tuple",
    "assert_u8_image_rgb",
]
