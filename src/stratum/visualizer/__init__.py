# -*- coding: utf-8 -*-
"""
Stratum Visualizer Package
==========================

Matplotlib previews of a single layer:

- `plot_layer`: raw segments, stitched contours and hatch vectors.
- `plot_mask`: a rasterized PixelMask.
"""

from .layer_plot import draw_hatch, draw_polygons, draw_segments, plot_layer, plot_mask

__all__ = ["draw_hatch", "draw_polygons", "draw_segments", "plot_layer", "plot_mask"]
