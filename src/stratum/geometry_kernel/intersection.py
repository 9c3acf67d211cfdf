# -*- coding: utf-8 -*-
"""
Intersection
============

Pure geometry intersection utilities.

This module must be stateless:
- no dependency on GeometryKernel / index
- only takes raw triangles/planes and returns results

Primary use in slicing:
    plane Z = z  ∩  triangle(v0,v1,v2)
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .config import Z_EPS
from .primitives import Segment2D, Vec2
from ..file_parser.mesh_data import MeshData

# (start, end) vertex indices of the three triangle edges
TRIANGLE_EDGES = ((0, 1), (1, 2), (2, 0))


def edge_plane_point(a: np.ndarray, b: np.ndarray, z: float) -> Vec2:
    """
    XY point where edge a->b meets plane Z = z.

    Linear interpolation on Z: t = (z - a.z) / (b.z - a.z). A coplanar edge
    (|dz| < Z_EPS) degenerates to the first endpoint.
    """
    dz = b[2] - a[2]
    if abs(dz) < Z_EPS:
        return (float(a[0]), float(a[1]))
    t = (z - a[2]) / dz
    return (float(a[0] + t * (b[0] - a[0])), float(a[1] + t * (b[1] - a[1])))


def intersect_triangle_with_plane(tri: np.ndarray, z: float) -> Optional[Segment2D]:
    """
    Compute intersection between triangle and plane Z = z.

    Vertices are classified with the single strict test ``v.z < z``.
    Triangles with 0 or 3 vertices below do not cross the plane.

    Args:
        tri: (3, 3) array of vertices.
        z: Plane height.

    Returns:
        None        -> no crossing, or a malformed triangle that does not
                       produce exactly two points (lenient: contributes nothing)
        Segment2D   -> one segment
    """
    below = [bool(tri[i][2] < z) for i in range(3)]
    n_below = sum(below)
    if n_below == 0 or n_below == 3:
        return None

    points: List[Vec2] = []
    for i, j in TRIANGLE_EDGES:
        if below[i] != below[j]:
            points.append(edge_plane_point(tri[i], tri[j], z))

    if len(points) != 2:
        return None
    return Segment2D(points[0], points[1])


def slice_mesh(mesh: MeshData, z: float) -> List[Segment2D]:
    """
    Intersect every triangle with plane Z = z, in triangle order.

    An empty list is a valid (empty) layer.
    """
    segments: List[Segment2D] = []
    for tri in mesh.triangles:
        seg = intersect_triangle_with_plane(tri, z)
        if seg is not None:
            segments.append(seg)
    return segments
