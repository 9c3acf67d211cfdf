# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
import numpy as np
from typing import Iterator, ClassVar

@dataclass
class MeshData:
    """
    Data class representing a triangle soup.

    Attributes:
        triangles: (M, 3, 3) float64 numpy array, triangle -> vertex -> xyz.
        id: Unique identifier for the mesh instance (auto-generated).
    """
    count: ClassVar[int] = 0

    triangles: np.ndarray = field(default_factory=lambda: np.zeros((0, 3, 3), dtype=np.float64))
    id: int = field(init=False)

    def __post_init__(self):
        tris = np.asarray(self.triangles, dtype=np.float64)
        if tris.size == 0:
            tris = tris.reshape(0, 3, 3)
        if tris.ndim != 3 or tris.shape[1:] != (3, 3):
            raise ValueError(f"triangles must have shape (M, 3, 3), got {tris.shape}")
        self.triangles = tris

        self.id = MeshData.count
        MeshData.count += 1

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0])

    @property
    def vertices(self) -> np.ndarray:
        """(3M, 3) view over every vertex in triangle order."""
        return self.triangles.reshape(-1, 3)

    def is_empty(self) -> bool:
        return self.triangle_count == 0

    def __len__(self) -> int:
        return self.triangle_count

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.triangles)

    def __repr__(self):
        return (f"MeshData(id={self.id}, "
                f"triangles_shape={self.triangles.shape})")
