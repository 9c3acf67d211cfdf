# -*- coding: utf-8 -*-
"""
stratum
=======

Slices triangle meshes into photocuring programs for two printer families:

- mask-projection (LCD / MSLA): one PNG mask per layer
- vector laser (SLA): contour traversals plus a boustrophedon hatch

Typical use::

    from stratum import LCDProfile, read_stl, slice_to_file

    mesh, _ = read_stl("part.stl")
    profile = LCDProfile(cols=1440, rows=2560, led_radius=0.025, layer_height=0.05)
    slice_to_file(mesh, profile, "part.gcode")
"""

from .default_config import CONFIG_VERSION, DEFAULTS
from .errors import ConfigError, EncodeError, MeshIOError, ParseError, StratumError
from .file_parser import MeshData, parse_file, parse_stl_lines, read_stl
from .geometry_kernel import Bounds3D, GeometryKernel, compute_bounds
from .build_prep import LCDProfile, PrintProfile, SLAProfile
from .gcode import Instruction, write_program
from .slicer import Slicer, generate_gcode, slice_to_file
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Bounds3D",
    "CONFIG_VERSION",
    "ConfigError",
    "DEFAULTS",
    "EncodeError",
    "GeometryKernel",
    "Instruction",
    "LCDProfile",
    "MeshData",
    "MeshIOError",
    "ParseError",
    "PrintProfile",
    "SLAProfile",
    "Slicer",
    "StratumError",
    "compute_bounds",
    "generate_gcode",
    "parse_file",
    "parse_stl_lines",
    "read_stl",
    "setup_logging",
    "slice_to_file",
    "write_program",
    "__version__",
]
