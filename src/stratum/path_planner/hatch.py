# -*- coding: utf-8 -*-
"""
Hatch Generator
===============

Boustrophedon fill vectors for the vector-laser path.

Works on the raw layer segments rather than stitched polygons, so
non-manifold slices that stitch badly still hatch by parity. A scanline
with an odd crossing count is skipped entirely; it is never partially
filled.
"""
import logging
from typing import List, Sequence

import numpy as np

from ..errors import ConfigError
from ..geometry_kernel.config import Z_EPS
from ..geometry_kernel.primitives import HatchLine, Segment2D
from ..raster.scanline import scanline_crossings, segments_to_array

logger = logging.getLogger(__name__)


def hatch_scanlines(seg_array: np.ndarray, pitch: float) -> np.ndarray:
    """Scan heights from min Y to max Y of the segment set, stepping by ``pitch``."""
    ys = np.concatenate([seg_array[:, 1], seg_array[:, 3]])
    y_min, y_max = float(ys.min()), float(ys.max())
    count = int(np.floor((y_max - y_min) / pitch + Z_EPS)) + 1
    return y_min + np.arange(count, dtype=np.float64) * pitch


def generate_hatch(segments: Sequence[Segment2D], pitch: float) -> List[HatchLine]:
    """
    Generate hatch lines spanning the cross-section.

    Args:
        segments: Raw layer segments.
        pitch: Distance between scanlines (mm).

    Returns:
        Lines in emission order. The direction flips after every scanline
        that produced lines (left->right, then right->left).

    Raises:
        ConfigError: If ``pitch`` is not positive.
    """
    if pitch <= 0.0:
        raise ConfigError(f"hatch pitch must be positive, got {pitch}")
    if not segments:
        return []

    seg_array = segments_to_array(segments)
    lines: List[HatchLine] = []
    forward = True
    skipped = 0
    for y in hatch_scanlines(seg_array, pitch):
        xs = scanline_crossings(seg_array, float(y))
        if len(xs) == 0:
            continue
        if len(xs) % 2:
            skipped += 1
            continue

        spans = [(float(xs[i]), float(xs[i + 1])) for i in range(0, len(xs), 2)]
        y = float(y)
        if forward:
            lines.extend(HatchLine((x0, y), (x1, y)) for x0, x1 in spans)
        else:
            lines.extend(HatchLine((x1, y), (x0, y)) for x0, x1 in reversed(spans))
        forward = not forward

    if skipped:
        logger.debug("Skipped %d hatch scanlines with odd crossing counts", skipped)
    return lines
