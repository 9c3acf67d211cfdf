# -*- coding: utf-8 -*-
"""
Rasterizer
==========

Even-odd scanline fill of one layer's segments into a build-plate mask.
"""
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .scanline import scanline_crossings, segments_to_array
from ..geometry_kernel.primitives import Segment2D


@dataclass
class PixelMask:
    """
    Binary exposure mask.

    Attributes:
        width: Pixel columns.
        height: Pixel rows.
        bits: (height, width) uint8 array of 0/1, row-major; row 0 is the
            scanline nearest Y = 0.
    """
    width: int
    height: int
    bits: np.ndarray

    def __post_init__(self):
        self.bits = np.asarray(self.bits, dtype=np.uint8)
        if self.bits.shape != (self.height, self.width):
            raise ValueError(f"bits shape {self.bits.shape} does not match {self.height}x{self.width}")

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelMask":
        return cls(width, height, np.zeros((height, width), dtype=np.uint8))

    @property
    def lit_count(self) -> int:
        return int(self.bits.sum())

    def to_rgba_bytes(self) -> bytes:
        """4 bytes per cell, every channel 0 or 255, for the image codec."""
        return np.repeat(self.bits * np.uint8(255), 4).tobytes()


def _to_pixel(value: float, pitch: float, limit: int) -> int:
    """round(value / pitch), half up, clamped to [0, limit]."""
    return min(max(int(math.floor(value / pitch + 0.5)), 0), limit)


def rasterize(
    segments: Sequence[Segment2D],
    width: int,
    height: int,
    pitch: float,
    offset: Tuple[float, float] = (0.0, 0.0),
) -> PixelMask:
    """
    Scan-convert a layer into a PixelMask.

    Each row's horizontal centre line y = (row + 0.5) * pitch is intersected
    with the offset segments; sorted crossings are paired 0-1, 2-3, ... and
    columns [round(x0/pitch), round(x1/pitch)) are lit. A row with an odd
    number of crossings is ambiguous and left empty.

    Args:
        segments: Layer segments in model XY.
        width: Grid columns.
        height: Grid rows.
        pitch: Millimetres per pixel.
        offset: XY translation from model to plate coordinates.

    Returns:
        PixelMask; a pure function of its arguments.
    """
    mask = PixelMask.blank(width, height)
    seg_array = segments_to_array(segments, offset)
    if seg_array.shape[0] == 0:
        return mask

    for row in range(height):
        xs = scanline_crossings(seg_array, (row + 0.5) * pitch)
        if len(xs) % 2:
            continue
        for i in range(0, len(xs) - 1, 2):
            start = _to_pixel(xs[i], pitch, width)
            end = _to_pixel(xs[i + 1], pitch, width)
            if end > start:
                mask.bits[row, start:end] = 1
    return mask
