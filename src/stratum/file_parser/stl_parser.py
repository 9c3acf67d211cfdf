"""STL Parser
Parse an ASCII triangle soup (ASCII STL) into the internal MeshData structure.

Main interfaces:
- parse_stl_lines: parse an iterable of text lines into a MeshData
- read_stl: open a file, parse it and compute its bounds

Only lines whose first token is ``vertex`` are significant; every other
line (solid/facet/outer loop/endloop/...) is ignored. Three consecutive
vertices form one triangle. No facet-count validation is performed.

Dependencies:
- stdlib: logging, pathlib, typing
- third party: numpy, tqdm
"""

import logging
import math
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np
from tqdm import tqdm

from .mesh_data import MeshData
from .workspace_utils import sha256_of_file
from ..errors import MeshIOError, ParseError
from ..geometry_kernel.bounds import Bounds3D, compute_bounds

logger = logging.getLogger(__name__)

VERTEX_KEYWORD = "vertex"


def _parse_vertex(tokens: List[str], line_number: int) -> List[float]:
    """Parse the three coordinates following the ``vertex`` keyword.

    Raises:
        ParseError: If fewer than three fields follow or one is not a finite number.
    """
    fields = tokens[1:4]
    if len(fields) < 3:
        raise ParseError(f"vertex needs 3 coordinates, got {len(fields)}", line_number)
    try:
        coords = [float(v) for v in fields]
    except ValueError as e:
        raise ParseError(f"malformed vertex coordinate in {' '.join(fields)!r}", line_number) from e
    if not all(math.isfinite(c) for c in coords):
        raise ParseError(f"non-finite vertex coordinate in {' '.join(fields)!r}", line_number)
    return coords


def parse_stl_lines(lines: Iterable[str], progress: bool = False) -> MeshData:
    """Parse ASCII STL text lines into a MeshData.

    Args:
        lines: Any iterable of text lines (file handle, list of str).
        progress: Whether to show a tqdm progress bar.

    Returns:
        MeshData holding every complete group of three vertices.

    Raises:
        ParseError: A vertex line carries malformed numeric fields. The whole
            load fails; nothing is skipped.
    """
    vertices: List[List[float]] = []
    it = tqdm(lines, desc="STL lines", unit="line", leave=False, disable=not progress)
    for line_number, line in enumerate(it, start=1):
        tokens = line.split()
        if not tokens or tokens[0].lower() != VERTEX_KEYWORD:
            continue
        vertices.append(_parse_vertex(tokens, line_number))

    remainder = len(vertices) % 3
    if remainder:
        logger.warning("Dropping %d trailing vertex(es) that do not form a triangle", remainder)
        vertices = vertices[:len(vertices) - remainder]

    triangles = np.asarray(vertices, dtype=np.float64).reshape(-1, 3, 3)
    return MeshData(triangles=triangles)


def read_stl(path: Union[str, Path], progress: bool = False) -> Tuple[MeshData, Bounds3D]:
    """Read an ASCII STL file and compute its bounding box.

    Args:
        path: Path to the STL file (str or Path).
        progress: Whether to show a progress bar while parsing.

    Returns:
        (mesh, bounds). An input without vertices yields an empty mesh and
        the all-zero bounds.

    Raises:
        MeshIOError: If the file cannot be opened.
        ParseError: If a vertex line is malformed or not finite.

    Examples:
        >>> from stratum.file_parser import read_stl
        >>> mesh, bounds = read_stl("part.stl")
        >>> mesh.triangle_count >= 0
        True
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise MeshIOError(f"Cannot open mesh source {path}: {e}") from e
    with f:
        mesh = parse_stl_lines(f, progress=progress)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Source %s sha256 %s", path, sha256_of_file(path))

    bounds = compute_bounds(mesh)
    logger.info("Loaded %d triangles from %s, bounds %s", mesh.triangle_count, path, bounds)
    return mesh, bounds
