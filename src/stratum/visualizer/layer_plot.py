# -*- coding: utf-8 -*-
"""
Layer preview with matplotlib.

Draws one layer as raw segments, stitched contours and hatch vectors, or a
rasterized mask as an image. Intended for debugging a slice, not for print
output.
"""
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from ..geometry_kernel.primitives import HatchLine, Polygon, Segment2D
from ..raster.rasterizer import PixelMask


def draw_segments(ax, segments: Sequence[Segment2D], color: str = "orange"):
    for seg in segments:
        ax.plot([seg.p1[0], seg.p2[0]], [seg.p1[1], seg.p2[1]], marker='o', markersize=2, color=color)


def draw_polygons(ax, polygons: Sequence[Polygon], color: str = "blue"):
    for poly in polygons:
        xs = [p[0] for p in poly.points]
        ys = [p[1] for p in poly.points]
        if poly.closed:
            xs.append(poly.points[0][0])
            ys.append(poly.points[0][1])
        ax.plot(xs, ys, color=color, linewidth=1.5)


def draw_hatch(ax, hatch: Sequence[HatchLine], color: str = "green"):
    for line in hatch:
        ax.plot([line.start[0], line.end[0]], [line.start[1], line.end[1]], color=color, linewidth=0.5)


def plot_layer(
    segments: Sequence[Segment2D],
    polygons: Optional[Sequence[Polygon]] = None,
    hatch: Optional[Sequence[HatchLine]] = None,
    ax=None,
    title: str = "Layer",
):
    """
    Plot one layer and return the Axes.

    Args:
        segments: Raw slice segments.
        polygons: Stitched (or compensated) contours, drawn on top.
        hatch: Fill vectors, drawn underneath the contours.
        ax: Existing Axes; a new figure is created when omitted.
        title: Axes title.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    draw_segments(ax, segments)
    if hatch:
        draw_hatch(ax, hatch)
    if polygons:
        draw_polygons(ax, polygons)

    ax.set_aspect("equal")
    ax.set_title(title)
    ax.grid(True)
    return ax


def plot_mask(mask: PixelMask, ax=None, title: str = "Mask"):
    """Show a PixelMask with row 0 at the bottom, matching plate Y."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(mask.bits, cmap="gray", origin="lower", vmin=0, vmax=1, interpolation="nearest")
    ax.set_title(f"{title} ({mask.lit_count} px)")
    return ax
