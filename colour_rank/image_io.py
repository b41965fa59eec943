# colour_rank/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import PixelGrid
from .errors import DecodeFailure, SourceUnavailable

"""
Pixel sources: decode an image file into a PixelGrid and shrink it by a fixed fraction.
"""


def load_pixel_grid(path: Union[str, Path]) -> PixelGrid:
    """Decode any Pillow-readable image into an RGB PixelGrid. Alpha is discarded."""
    path = Path(path)
    if not path.is_file():
        raise SourceUnavailable(f"not found: {path}")
    try:
        with Image.open(path) as im0:
            im = ImageOps.exif_transpose(im0).convert("RGB")
    except UnidentifiedImageError as e:
        raise DecodeFailure(f"cannot decode {path.name}: {e}") from e
    except PermissionError as e:
        raise SourceUnavailable(f"cannot read {path}: {e}") from e
    except OSError as e:
        raise DecodeFailure(f"cannot decode {path.name}: {e}") from e
    return PixelGrid(np.array(im, dtype=np.uint8))


def scaled_size(width: int, height: int, denominator: int) -> tuple[int, int]:
    """Target (width, height) for a 1/denominator scale, never below 1x1."""
    if denominator <= 1:
        return width, height
    return max(1, width // denominator), max(1, height // denominator)


def scale_pixel_grid(grid: PixelGrid, denominator: int) -> PixelGrid:
    """Bilinear downscale to 1/denominator of each dimension."""
    dst_w, dst_h = scaled_size(grid.width, grid.height, denominator)
    if (dst_w, dst_h) == (grid.width, grid.height):
        return grid
    im = Image.fromarray(np.asarray(grid.rgb))
    im2 = im.resize((dst_w, dst_h), resample=Image.Resampling.BILINEAR)
    return PixelGrid(np.array(im2, dtype=np.uint8))


__all__ = ["load_pixel_grid", "scaled_size", "scale_pixel_grid"]
