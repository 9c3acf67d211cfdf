# -*- coding: utf-8 -*-
# geom_kernel.py
"""
Geometry Kernel
===============

This module defines the 3D geometry world of stratum.

It takes a parsed MeshData and builds:
- the mesh bounding box
- a Z-interval spatial index
- per-layer plane intersection queries

This is the ONLY interface the slicer should talk to.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..file_parser.mesh_data import MeshData
from .bounds import Bounds3D, compute_bounds
from .config import Z_EPS
from .intersection import intersect_triangle_with_plane
from .primitives import Segment2D
from .spatial_index import SpatialIndex


@dataclass
class Layer:
    """
    One cross-section of the mesh; lives for a single emitter iteration.

    Attributes:
        index: 0-based layer number.
        z: Height of the slicing plane (model coordinates).
        top_z: Build-plate relative height of the layer top, used for Z moves.
        segments: Unordered cut segments; empty means nothing to expose.
    """
    index: int
    z: float
    top_z: float
    segments: List[Segment2D] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.segments


def layer_count(bounds: Bounds3D, layer_height: float) -> int:
    """Number of layers needed to cover the model height."""
    height = bounds.height
    if height <= Z_EPS:
        return 0
    return max(int(math.ceil(height / layer_height - Z_EPS)), 0)


def layer_heights(bounds: Bounds3D, layer_height: float) -> Iterator[Tuple[int, float, float]]:
    """
    Yield (index, slice_z, top_z) for every layer from min Z to max Z.

    Layer k spans [min_z + k*h, min_z + (k+1)*h] and is sampled at its
    mid-plane, which keeps the plane off vertex heights of stacked
    layers. ``top_z`` is (k+1)*h above the build plate.
    """
    base = bounds.min_z
    for k in range(layer_count(bounds, layer_height)):
        yield k, base + (k + 0.5) * layer_height, (k + 1) * layer_height


class GeometryKernel:
    """
    GeometryKernel represents a queryable 3D mesh world.

    It is the bridge between:
        File Parser (MeshData)
            ->
        Slicer (planes, segments, toolpaths)

    The mesh must not be mutated after the kernel is built.
    """

    # -------------------------
    # Construction
    # -------------------------

    def __init__(self, mesh: MeshData, bounds: Optional[Bounds3D] = None):
        """
        Build the geometry kernel from a parsed mesh.

        Args:
            mesh: Mesh produced by file_parser (already scaled if needed).
            bounds: Precomputed bounds; rescanned when omitted.
        """
        self.mesh = mesh
        self.bounds = bounds if bounds is not None else compute_bounds(mesh)
        self.spatial = SpatialIndex(mesh.triangles)

    # ============================================================
    #                  High-level slicing API
    # ============================================================

    def query_triangles_by_plane(self, z: float) -> List[int]:
        """
        Return candidate triangle IDs that may intersect with plane Z = z.

        This uses spatial index (z_min / z_max) to prune triangles.
        """
        return self.spatial.query(z)

    def slice_at(self, z: float) -> List[Segment2D]:
        """
        Return the segments where the mesh crosses plane Z = z, in triangle order.

        Pruning never changes the result: a triangle outside [z_min, z_max]
        has 0 or 3 vertices below the plane.
        """
        segments: List[Segment2D] = []
        for tid in self.query_triangles_by_plane(z):
            seg = intersect_triangle_with_plane(self.mesh.triangles[tid], z)
            if seg is not None:
                segments.append(seg)
        return segments

    def layer_planes(self, layer_height: float) -> Iterator[Layer]:
        """Yield the (unsliced) layers from min Z to max Z."""
        for index, z, top_z in layer_heights(self.bounds, layer_height):
            yield Layer(index=index, z=z, top_z=top_z)

    def slice_layer(self, layer: Layer) -> Layer:
        layer.segments = self.slice_at(layer.z)
        return layer
