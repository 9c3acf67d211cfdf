import numpy as np
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..file_parser.mesh_data import MeshData


class Bounds3D:
    """Axis-aligned bounding box with float64 precision.

    Stores per-axis minima and maxima as 3D float vectors. An empty mesh
    produces the all-zero box, never NaN or inf.

    Args:
        min_point: Minimum corner (min_x, min_y, min_z).
        max_point: Maximum corner (max_x, max_y, max_z).
    """
    def __init__(self, min_point, max_point):
        self.min = np.array(min_point, dtype=np.float64)
        self.max = np.array(max_point, dtype=np.float64)

    @classmethod
    def empty(cls) -> "Bounds3D":
        return cls((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    @property
    def min_x(self) -> float:
        return float(self.min[0])

    @property
    def min_y(self) -> float:
        return float(self.min[1])

    @property
    def min_z(self) -> float:
        return float(self.min[2])

    @property
    def max_x(self) -> float:
        return float(self.max[0])

    @property
    def max_y(self) -> float:
        return float(self.max[1])

    @property
    def max_z(self) -> float:
        return float(self.max[2])

    @property
    def width(self) -> float:
        return float(self.max[0] - self.min[0])

    @property
    def depth(self) -> float:
        return float(self.max[1] - self.min[1])

    @property
    def height(self) -> float:
        return float(self.max[2] - self.min[2])

    def extent(self) -> np.ndarray:
        """Return per-axis extent vector e = max - min."""
        return (self.max - self.min).astype(np.float64, copy=False)

    def center(self) -> np.ndarray:
        """Return box center c = (min + max) / 2."""
        return (self.min + self.max) * 0.5

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.min_x, self.min_y, self.min_z, self.max_x, self.max_y, self.max_z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bounds3D):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def __repr__(self) -> str:
        return f"Bounds3D(min={self.min.tolist()}, max={self.max.tolist()})"


def compute_bounds(mesh: "MeshData") -> Bounds3D:
    """Full scan of every vertex; all-zero box for an empty mesh."""
    verts = mesh.vertices
    if verts.shape[0] == 0:
        return Bounds3D.empty()
    return Bounds3D(verts.min(axis=0), verts.max(axis=0))
