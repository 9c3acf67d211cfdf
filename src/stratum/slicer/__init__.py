from .slicer import Slicer, generate_gcode, mask_file_name, slice_to_file

__all__ = ["Slicer", "generate_gcode", "mask_file_name", "slice_to_file"]
