"""
Geometry transforms.

Uniform XY scaling of a mesh so that it fits a build plate with a padding
margin (mask-projection path only).

Functions:
    compute_scale_factor: Uniform factor that fits the model into the
    printable area.
    scale_about_centroid: Apply that factor in place around the XY centroid.
    fit_to_build_area: Both of the above, returning the new bounds.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .bounds import Bounds3D, compute_bounds
from .config import SCALE_EPS, Z_EPS
from ..file_parser.mesh_data import MeshData

logger = logging.getLogger(__name__)


def compute_scale_factor(
    bounds: Bounds3D,
    build_width: float,
    build_height: float,
    padding_percentage: float,
) -> float:
    """Return the uniform factor that fits the model's XY footprint into the plate.

    printable = build * (1 - 2 * padding / 100)
    factor    = min(printable_w / model_w, printable_h / model_h)

    A model with zero extent on X or Y, or a non-positive printable area,
    yields 1.0 (no-op). This is a safety default, not a guarantee that the
    model fits.

    Args:
        bounds: Model bounding box.
        build_width: Plate width in mm.
        build_height: Plate depth in mm.
        padding_percentage: Margin on each side, 0..100.

    Returns:
        The scale factor.

    Example:
        >>> b = Bounds3D((0, 0, 0), (100, 100, 10))
        >>> compute_scale_factor(b, 50, 50, 10)
        0.4
    """
    model_w = bounds.width
    model_h = bounds.depth
    if model_w <= Z_EPS or model_h <= Z_EPS:
        return 1.0

    keep = 1.0 - 2.0 * padding_percentage / 100.0
    printable_w = build_width * keep
    printable_h = build_height * keep
    if printable_w <= 0.0 or printable_h <= 0.0:
        return 1.0

    return float(min(printable_w / model_w, printable_h / model_h))


def scale_about_centroid(mesh: MeshData, bounds: Bounds3D, factor: float) -> Bounds3D:
    """Scale every vertex in place around the XY centroid of ``bounds``.

    v' = c + (v - c) * factor on X and Y; Z is untouched. The returned bounds
    come from a full rescan, since the float round trip can move extrema.

    Returns:
        New bounds, or ``bounds`` itself when |factor - 1| <= SCALE_EPS.
    """
    if abs(factor - 1.0) <= SCALE_EPS:
        return bounds

    c = bounds.center()[:2]
    xy = mesh.triangles[:, :, :2]
    mesh.triangles[:, :, :2] = c + (xy - c) * factor
    return compute_bounds(mesh)


def fit_to_build_area(
    mesh: MeshData,
    bounds: Bounds3D,
    build_width: float,
    build_height: float,
    padding_percentage: float,
) -> Tuple[float, Bounds3D]:
    """Scale the mesh so it fits the build area; returns (factor, new bounds)."""
    factor = compute_scale_factor(bounds, build_width, build_height, padding_percentage)
    new_bounds = scale_about_centroid(mesh, bounds, factor)
    logger.info("Scale factor %.6f, model footprint %.4f x %.4f mm",
                factor, new_bounds.width, new_bounds.depth)
    return factor, new_bounds


def centering_offset(bounds: Bounds3D, build_width: float, build_height: float) -> np.ndarray:
    """XY translation that moves the model's centroid onto the plate centre."""
    plate_center = np.array([build_width * 0.5, build_height * 0.5], dtype=np.float64)
    return plate_center - bounds.center()[:2]
