# -*- coding: utf-8 -*-
"""
Spatial Index
=============

Fast Z-plane queries for slicing.

Given a plane Z = z,
returns triangle IDs whose z-range intersects that plane.
"""

import numpy as np
from bisect import bisect_left, bisect_right
from typing import List


class SpatialIndex:
    """
    Z-interval based spatial index for triangle meshes.

    Used to quickly find candidate triangles for slicing planes.
    """

    def __init__(self, triangles: np.ndarray):
        """
        Build spatial index from a triangle soup.

        Args:
            triangles: (M,3,3) vertex array
        """
        self.triangles = triangles

        # Precompute z-ranges for each triangle
        if len(triangles):
            z = triangles[:, :, 2]
            self.tri_z_min = z.min(axis=1)
            self.tri_z_max = z.max(axis=1)
        else:
            self.tri_z_min = np.zeros(0)
            self.tri_z_max = np.zeros(0)

        # Build sorted index
        self.sorted_by_zmin = np.argsort(self.tri_z_min, kind="stable")
        self.sorted_by_zmax = np.argsort(self.tri_z_max, kind="stable")

        self.zmin_values = self.tri_z_min[self.sorted_by_zmin].tolist()
        self.zmax_values = self.tri_z_max[self.sorted_by_zmax].tolist()

    def __len__(self) -> int:
        return len(self.zmin_values)

    # -------------------------------------------------

    def query(self, z: float) -> List[int]:
        """
        Return triangle IDs whose Z-interval intersects z-plane, ascending.

        This is O(log N + K) where K is number of hits.
        """
        # find all triangles with z_min <= z
        idx1 = bisect_right(self.zmin_values, z)
        candidates1 = set(self.sorted_by_zmin[:idx1].tolist())

        # find all triangles with z_max >= z
        idx2 = bisect_left(self.zmax_values, z)
        candidates2 = set(self.sorted_by_zmax[idx2:].tolist())

        # intersection = triangles whose z_min <= z <= z_max
        return sorted(candidates1 & candidates2)
