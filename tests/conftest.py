"""Shared fixtures for stratum tests."""

import numpy as np
import pytest

from stratum.file_parser.mesh_data import MeshData

# Upward-facing unit triangle used by the end-to-end mask-projection scenario
SCENARIO_STL = """solid test
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 1 0 1
      vertex 0 1 0
    endloop
  endfacet
endsolid test
"""

# Corner order: bottom ring (z0) then top ring (z1), counter-clockwise
BOX_FACES = (
    (0, 2, 1), (0, 3, 2),   # bottom
    (4, 5, 6), (4, 6, 7),   # top
    (0, 1, 5), (0, 5, 4),   # y = y0
    (1, 2, 6), (1, 6, 5),   # x = x1
    (2, 3, 7), (2, 7, 6),   # y = y1
    (3, 0, 4), (3, 4, 7),   # x = x0
)


def box_triangles(lo, hi) -> np.ndarray:
    """(12, 3, 3) triangle soup of an axis-aligned box."""
    x0, y0, z0 = lo
    x1, y1, z1 = hi
    corners = np.array([
        [x0, y0, z0], [x1, y0, z0], [x1, y1, z0], [x0, y1, z0],
        [x0, y0, z1], [x1, y0, z1], [x1, y1, z1], [x0, y1, z1],
    ], dtype=np.float64)
    return corners[np.array(BOX_FACES)]


@pytest.fixture
def scenario_stl_text():
    return SCENARIO_STL


@pytest.fixture
def scenario_stl_file(tmp_path):
    path = tmp_path / "test.stl"
    path.write_text(SCENARIO_STL, encoding="utf-8")
    return path


@pytest.fixture
def cube_mesh():
    """Fresh 10 mm cube at the origin (the LCD path scales meshes in place)."""
    return MeshData(triangles=box_triangles((0.0, 0.0, 0.0), (10.0, 10.0, 10.0)))


@pytest.fixture
def make_box():
    return box_triangles
