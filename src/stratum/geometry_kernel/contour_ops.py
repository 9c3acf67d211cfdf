# -*- coding: utf-8 -*-
"""
Contour Operations Module
=========================
Reassembles the unordered segment soup of one layer into polygonal trails,
and offsets closed contours for laser beam compensation.

Stitching works on an arena of merged endpoints addressed by integer id.
Endpoints are merged through a tolerance grid (see ``PointIndex``); the
tolerance policy itself lives in ``points_coincide`` only.

Known limitation: at vertices of degree > 2 (T-junctions from non-manifold
slices) the walk takes the first-listed edge. The result is always a valid
partition of the segments into trails, but not necessarily the "natural"
polygon boundary.
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pyclipper

from .config import CLIPPER_SCALE, INV_CLIPPER_SCALE, POINT_EPS
from .primitives import Polygon, Segment2D, Vec2

logger = logging.getLogger(__name__)


def to_int64(points: Sequence[Vec2]) -> np.ndarray:
    """Quantize float points to the pyclipper integer grid."""
    return np.round(np.asarray(points, dtype=np.float64) * CLIPPER_SCALE).astype(np.int64)


def to_float64(points) -> np.ndarray:
    """Dequantize integer grid points to float."""
    return np.asarray(points, dtype=np.float64) * INV_CLIPPER_SCALE


def calculate_signed_area(points: Sequence[Vec2]) -> float:
    """Signed area of a 2D loop (Shoelace formula), positive for CCW."""
    if len(points) < 3:
        return 0.0
    loop = np.asarray(points, dtype=np.float64)
    x = loop[:, 0]
    y = loop[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * (np.dot(x, y_next) - np.dot(x_next, y)))


def points_coincide(a: Vec2, b: Vec2, eps: float = POINT_EPS) -> bool:
    """Tolerance equality: within ``eps`` on each axis."""
    return abs(a[0] - b[0]) <= eps and abs(a[1] - b[1]) <= eps


class PointIndex:
    """
    Arena of merged 2D points.

    Coordinates are snapped to an ``eps`` grid for hashing. Two points that
    coincide within ``eps`` always fall in the same or a neighbouring cell,
    so a 3x3 probe finds every candidate.
    """

    def __init__(self, eps: float = POINT_EPS):
        self.eps = eps
        self.points: List[Vec2] = []
        self._grid: Dict[Tuple[int, int], List[int]] = {}

    def _cell(self, p: Vec2) -> Tuple[int, int]:
        return (math.floor(p[0] / self.eps), math.floor(p[1] / self.eps))

    def find(self, p: Vec2) -> Optional[int]:
        """Id of the first stored point coinciding with ``p``, or None."""
        cx, cy = self._cell(p)
        best = None
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for pid in self._grid.get((cx + dx, cy + dy), ()):
                    if points_coincide(self.points[pid], p, self.eps) and (best is None or pid < best):
                        best = pid
        return best

    def add(self, p: Vec2) -> int:
        """Return the id of ``p``, storing it if no coinciding point exists."""
        pid = self.find(p)
        if pid is not None:
            return pid
        pid = len(self.points)
        self.points.append((float(p[0]), float(p[1])))
        self._grid.setdefault(self._cell(p), []).append(pid)
        return pid

    def __len__(self) -> int:
        return len(self.points)


def _pick_start(order: List[int], adjacency: List[List[int]]) -> int:
    """Lexicographically first vertex with odd remaining degree, else with any edge."""
    fallback = None
    for vid in order:
        degree = len(adjacency[vid])
        if degree == 0:
            continue
        if degree % 2 == 1:
            return vid
        if fallback is None:
            fallback = vid
    return fallback


def stitch_segments(segments: Sequence[Segment2D], eps: float = POINT_EPS) -> List[Polygon]:
    """
    Convert soup of segments to polygonal trails.

    Args:
        segments: Unordered, undirected segments of one layer.
        eps: Per-axis coincidence tolerance.

    Returns:
        Polygons covering every segment exactly once. ``closed`` is True
        when the walk returned to its starting point.
    """
    if not segments:
        return []

    index = PointIndex(eps)
    edges: List[Tuple[int, int]] = []
    for seg in segments:
        edges.append((index.add(seg.p1), index.add(seg.p2)))

    adjacency: List[List[int]] = [[] for _ in range(len(index))]
    for eid, (a, b) in enumerate(edges):
        adjacency[a].append(eid)
        adjacency[b].append(eid)

    points = index.points
    order = sorted(range(len(points)), key=lambda vid: points[vid])

    polygons: List[Polygon] = []
    remaining = len(edges)
    while remaining:
        start = _pick_start(order, adjacency)
        path = [start]
        current = start
        closed = False
        while adjacency[current]:
            eid = adjacency[current][0]
            a, b = edges[eid]
            adjacency[a].remove(eid)
            adjacency[b].remove(eid)
            remaining -= 1
            nxt = b if a == current else a
            if nxt == start:
                closed = True
                break
            path.append(nxt)
            current = nxt
        polygons.append(Polygon(points=[points[vid] for vid in path], closed=closed))

    if logger.isEnabledFor(logging.DEBUG):
        areas = [calculate_signed_area(p.points) for p in polygons if p.closed]
        logger.debug("Stitched %d segments into %d polygons (%d closed: %d ccw, %d cw)",
                     len(edges), len(polygons), len(areas),
                     sum(a > 0 for a in areas), sum(a < 0 for a in areas))
    return polygons


def compensate_beam(polygons: Sequence[Polygon], radius: float) -> List[Polygon]:
    """
    Offset closed contours inward by the laser spot radius.

    Closed contours with at least 3 points are first merged with an even-odd
    union (which orients outer boundaries CCW and holes CW), then offset by
    ``-radius``: outer boundaries shrink and holes grow. Contours thinner
    than the spot vanish. Open or degenerate polygons pass through unchanged.
    """
    if radius <= 0.0:
        return list(polygons)

    solid = [p for p in polygons if p.closed and len(p.points) >= 3]
    passthrough = [p for p in polygons if not (p.closed and len(p.points) >= 3)]
    if not solid:
        return passthrough

    pc = pyclipper.Pyclipper()
    added = 0
    for poly in solid:
        try:
            pc.AddPath(to_int64(poly.points).tolist(), pyclipper.PT_SUBJECT, True)
            added += 1
        except pyclipper.ClipperException:
            logger.debug("Skipping zero-area contour with %d points", len(poly.points))
    if not added:
        return passthrough

    merged = pc.Execute(pyclipper.CT_UNION, pyclipper.PFT_EVENODD, pyclipper.PFT_EVENODD)

    co = pyclipper.PyclipperOffset()
    co.AddPaths(merged, pyclipper.JT_MITER, pyclipper.ET_CLOSEDPOLYGON)
    shrunk = co.Execute(-radius * CLIPPER_SCALE)

    result = [
        Polygon(points=[(float(x), float(y)) for x, y in to_float64(path)], closed=True)
        for path in shrunk
    ]
    logger.debug("Beam compensation r=%.4f: %d contours -> %d", radius, len(solid), len(result))
    return result + passthrough
