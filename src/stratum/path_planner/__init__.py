from .hatch import generate_hatch, hatch_scanlines

__all__ = ["generate_hatch", "hatch_scanlines"]
