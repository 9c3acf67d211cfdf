# -*- coding: utf-8 -*-
"""
Scanline helpers shared by the rasterizer and the hatch generator.

Crossings follow the even-odd rule with a half-open inequality
(``y1 < y <= y2`` or the mirror), so a scanline passing exactly through a
vertex shared by two segments counts it once, and horizontal segments never
count.
"""
from typing import Sequence, Tuple

import numpy as np

from ..geometry_kernel.primitives import Segment2D


def segments_to_array(segments: Sequence[Segment2D], offset: Tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """(N, 4) float64 array of x1, y1, x2, y2, translated by ``offset``."""
    if not segments:
        return np.zeros((0, 4), dtype=np.float64)
    arr = np.array([(s.p1[0], s.p1[1], s.p2[0], s.p2[1]) for s in segments], dtype=np.float64)
    arr[:, [0, 2]] += offset[0]
    arr[:, [1, 3]] += offset[1]
    return arr


def scanline_crossings(seg_array: np.ndarray, y: float) -> np.ndarray:
    """Sorted X coordinates where the horizontal line at ``y`` crosses the segments."""
    if seg_array.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)
    x1, y1, x2, y2 = seg_array[:, 0], seg_array[:, 1], seg_array[:, 2], seg_array[:, 3]
    hit = ((y1 < y) & (y <= y2)) | ((y2 < y) & (y <= y1))
    if not hit.any():
        return np.zeros(0, dtype=np.float64)
    x1, y1, x2, y2 = x1[hit], y1[hit], x2[hit], y2[hit]
    xs = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
    return np.sort(xs)
