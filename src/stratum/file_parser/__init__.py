# -*- coding: utf-8 -*-
"""
Stratum File Parser Package
===========================

Reads triangle meshes for slicing.

Currently supported formats:
- ASCII STL (triangle soup)

Usage Example:
    from stratum.file_parser import read_stl
    mesh, bounds = read_stl("model.stl")
"""

from .mesh_data import MeshData
from .stl_parser import parse_stl_lines, read_stl
from .workspace_utils import ensure_directory, sha256_of_file
from .file_dispatcher import parse_file

__all__ = [
    "MeshData",
    "ensure_directory",
    "parse_file",
    "parse_stl_lines",
    "read_stl",
    "sha256_of_file",
]
