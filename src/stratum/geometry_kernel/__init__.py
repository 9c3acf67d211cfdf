# -*- coding: utf-8 -*-

from .config import POINT_EPS, SCALE_EPS, Z_EPS
from .bounds import Bounds3D, compute_bounds
from .primitives import HatchLine, Polygon, Segment2D, Vec2
from .intersection import edge_plane_point, intersect_triangle_with_plane, slice_mesh
from .spatial_index import SpatialIndex
from .transforms import centering_offset, compute_scale_factor, fit_to_build_area, scale_about_centroid
from .contour_ops import PointIndex, calculate_signed_area, compensate_beam, points_coincide, stitch_segments
from .geom_kernel import GeometryKernel, Layer, layer_count, layer_heights

__all__ = [
    "Bounds3D",
    "GeometryKernel",
    "HatchLine",
    "Layer",
    "POINT_EPS",
    "PointIndex",
    "Polygon",
    "SCALE_EPS",
    "Segment2D",
    "SpatialIndex",
    "Vec2",
    "Z_EPS",
    "calculate_signed_area",
    "centering_offset",
    "compensate_beam",
    "compute_bounds",
    "compute_scale_factor",
    "edge_plane_point",
    "fit_to_build_area",
    "intersect_triangle_with_plane",
    "layer_count",
    "layer_heights",
    "points_coincide",
    "scale_about_centroid",
    "slice_mesh",
    "stitch_segments",
]
