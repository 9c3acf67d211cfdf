"""Tests for plane slicing and the Z-interval index."""

import numpy as np
import pytest

from stratum.file_parser import MeshData
from stratum.geometry_kernel import (
    Bounds3D,
    GeometryKernel,
    SpatialIndex,
    edge_plane_point,
    intersect_triangle_with_plane,
    layer_count,
    layer_heights,
    slice_mesh,
)

SCENARIO_TRIANGLE = np.array([[0, 0, 0], [1, 0, 1], [0, 1, 0]], dtype=np.float64)


class TestIntersectTriangleWithPlane:
    """Tests for single-triangle intersection."""

    def test_scenario_triangle_yields_one_segment(self):
        """Test the unit triangle at Z=0.5 gives one segment on its edges."""
        seg = intersect_triangle_with_plane(SCENARIO_TRIANGLE, 0.5)

        assert seg is not None
        assert seg.p1 == pytest.approx((0.5, 0.0))
        assert seg.p2 == pytest.approx((0.5, 0.5))

    def test_endpoints_interpolate_on_plane(self):
        """Each endpoint is the point at height z on some crossing edge."""
        tri = np.array([[0, 0, -1], [4, 0, 3], [0, 4, 1]], dtype=np.float64)
        z = 0.25
        seg = intersect_triangle_with_plane(tri, z)

        assert seg is not None
        for p in (seg.p1, seg.p2):
            on_edge = False
            for i, j in ((0, 1), (1, 2), (2, 0)):
                a, b = tri[i], tri[j]
                if (a[2] - z) * (b[2] - z) > 0:
                    continue
                t = (z - a[2]) / (b[2] - a[2])
                expected = a[:2] + t * (b[:2] - a[:2])
                on_edge = on_edge or np.allclose(p, expected)
            assert on_edge

    def test_no_crossing(self):
        """All vertices on one side give None."""
        assert intersect_triangle_with_plane(SCENARIO_TRIANGLE, 2.0) is None
        assert intersect_triangle_with_plane(SCENARIO_TRIANGLE, -1.0) is None

    def test_plane_through_vertex_uses_strict_below(self):
        """A vertex exactly at z counts as not below."""
        tri = np.array([[0, 0, 0], [1, 0, 0.5], [0, 1, 1]], dtype=np.float64)
        seg = intersect_triangle_with_plane(tri, 0.5)

        assert seg is not None
        assert seg.p1 == pytest.approx((1.0, 0.0))
        assert seg.p2 == pytest.approx((0.0, 0.5))

    def test_flat_triangle_on_plane(self):
        """A triangle lying in the plane has no vertex below: no segment."""
        tri = np.array([[0, 0, 1], [1, 0, 1], [0, 1, 1]], dtype=np.float64)
        assert intersect_triangle_with_plane(tri, 1.0) is None

    def test_coplanar_edge_degenerates_to_first_endpoint(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([5.0, 6.0, 3.0])
        assert edge_plane_point(a, b, 3.0) == (1.0, 2.0)


class TestSpatialIndex:
    """Tests for the Z-interval index."""

    def test_query_returns_sorted_candidates(self, make_box):
        tris = np.concatenate([make_box((0, 0, 0), (1, 1, 1)), make_box((0, 0, 5), (1, 1, 6))])
        index = SpatialIndex(tris)

        assert len(index) == 24
        low = index.query(0.5)
        assert low == sorted(low)
        assert all(tid < 12 for tid in low)
        assert index.query(3.0) == []
        assert all(tid >= 12 for tid in index.query(5.5))

    def test_empty_index(self):
        index = SpatialIndex(np.zeros((0, 3, 3)))
        assert len(index) == 0
        assert index.query(0.0) == []


class TestGeometryKernel:
    """Tests for the slicing facade."""

    def test_pruned_slice_matches_full_scan(self, make_box):
        """Index pruning never changes the segments."""
        tris = np.concatenate([make_box((0, 0, 0), (3, 3, 2)), make_box((5, 5, 1), (7, 8, 4))])
        mesh = MeshData(triangles=tris)
        kernel = GeometryKernel(mesh)

        for z in (0.5, 1.0, 1.5, 2.0, 3.3):
            assert kernel.slice_at(z) == slice_mesh(mesh, z)

    def test_cube_layers(self, cube_mesh):
        """A 10 mm cube at 1 mm layers gives 10 layers of 8 segments each."""
        kernel = GeometryKernel(cube_mesh)
        layers = [kernel.slice_layer(layer) for layer in kernel.layer_planes(1.0)]

        assert len(layers) == 10
        assert [layer.index for layer in layers] == list(range(10))
        assert all(len(layer.segments) == 8 for layer in layers)
        assert layers[0].z == pytest.approx(0.5)
        assert layers[-1].top_z == pytest.approx(10.0)

    def test_empty_mesh_has_no_layers(self):
        kernel = GeometryKernel(MeshData())
        assert list(kernel.layer_planes(0.1)) == []


class TestLayerHeights:
    """Tests for layer enumeration."""

    def test_mid_plane_sampling(self):
        """Layers sample their mid-plane; top_z is plate relative."""
        bounds = Bounds3D((0, 0, 2), (1, 1, 5))
        heights = list(layer_heights(bounds, 1.0))

        assert [h[0] for h in heights] == [0, 1, 2]
        assert [h[1] for h in heights] == pytest.approx([2.5, 3.5, 4.5])
        assert [h[2] for h in heights] == pytest.approx([1.0, 2.0, 3.0])

    def test_partial_top_layer_is_covered(self):
        bounds = Bounds3D((0, 0, 0), (1, 1, 1.05))
        assert layer_count(bounds, 0.5) == 3

    def test_exact_multiple_adds_no_extra_layer(self):
        bounds = Bounds3D((0, 0, 0), (1, 1, 0.3))
        assert layer_count(bounds, 0.1) == 3

    def test_zero_height(self):
        assert layer_count(Bounds3D.empty(), 0.1) == 0
