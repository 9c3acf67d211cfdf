# -*- coding: utf-8 -*-
"""
File Dispatcher
Single parsing entry point that picks a parser from the file suffix.

Main interface:
- parse_file: returns (MeshData, Bounds3D)
"""

from pathlib import Path
from typing import Any, Tuple, Union

from .mesh_data import MeshData
from .stl_parser import read_stl
from ..errors import MeshIOError
from ..geometry_kernel.bounds import Bounds3D


def parse_file(file_path: Union[str, Path], **kwargs: Any) -> Tuple[MeshData, Bounds3D]:
    """Dispatch file parsing based on file suffix.

    Args:
        file_path: Path to the mesh file.
        **kwargs: Forwarded to the concrete parser (e.g. progress).

    Returns:
        (mesh, bounds) from the concrete parser.

    Raises:
        MeshIOError: When the file does not exist.
        ValueError: When the file type is not supported.

    Examples:
        >>> from stratum.file_parser import parse_file
        >>> mesh, bounds = parse_file("sample.stl")
    """
    path = Path(file_path)
    if not path.exists():
        raise MeshIOError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix == ".stl":
        return read_stl(path, **kwargs)
    raise ValueError(f"Unsupported file format: {suffix}. Only .stl is supported.")
