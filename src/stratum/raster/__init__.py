from .scanline import scanline_crossings, segments_to_array
from .rasterizer import PixelMask, rasterize

__all__ = ["PixelMask", "rasterize", "scanline_crossings", "segments_to_array"]
