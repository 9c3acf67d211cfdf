"""Tests for the scanline rasterizer."""

import numpy as np
import pytest

from stratum.geometry_kernel import Segment2D
from stratum.raster import PixelMask, rasterize, scanline_crossings, segments_to_array


def square_segments(x0, y0, x1, y1):
    return [
        Segment2D((x0, y0), (x1, y0)),
        Segment2D((x1, y0), (x1, y1)),
        Segment2D((x1, y1), (x0, y1)),
        Segment2D((x0, y1), (x0, y0)),
    ]


class TestScanlineCrossings:
    """Tests for the shared half-open crossing rule."""

    def test_shared_vertex_counted_once(self):
        """A scanline through the joint of two segments counts one crossing."""
        segs = segments_to_array([Segment2D((0, 0), (1, 1)), Segment2D((1, 1), (0, 2))])
        assert len(scanline_crossings(segs, 1.0)) == 1

    def test_horizontal_segments_ignored(self):
        segs = segments_to_array([Segment2D((0, 1), (5, 1))])
        assert len(scanline_crossings(segs, 1.0)) == 0

    def test_offset_applied(self):
        segs = segments_to_array([Segment2D((0, 0), (0, 2))], offset=(3.0, 1.0))
        np.testing.assert_allclose(scanline_crossings(segs, 2.0), [3.0])


class TestPixelMask:
    """Tests for the mask container."""

    def test_rgba_bytes(self):
        mask = PixelMask(2, 1, np.array([[1, 0]]))
        assert mask.to_rgba_bytes() == bytes([255, 255, 255, 255, 0, 0, 0, 0])
        assert mask.lit_count == 1

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            PixelMask(3, 2, np.zeros((3, 2)))


class TestRasterize:
    """Tests for even-odd fill."""

    def test_square_fill(self):
        """Rows and columns inside the square are lit, nothing else."""
        mask = rasterize(square_segments(1, 1, 4, 4), 5, 5, 1.0)

        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[1:4, 1:4] = 1
        np.testing.assert_array_equal(mask.bits, expected)
        assert mask.lit_count == 9

    def test_offset_shifts_fill(self):
        mask = rasterize(square_segments(-1, -1, 1, 1), 6, 6, 1.0, offset=(3.0, 3.0))

        assert mask.lit_count == 4
        assert mask.bits[2:4, 2:4].all()

    def test_idempotent(self):
        """Same inputs give bit-identical masks."""
        segments = square_segments(0.3, 0.7, 7.9, 5.1) + square_segments(2, 2, 4, 4)
        first = rasterize(segments, 10, 8, 0.8, offset=(0.5, 0.25))
        second = rasterize(segments, 10, 8, 0.8, offset=(0.5, 0.25))

        np.testing.assert_array_equal(first.bits, second.bits)

    def test_hole_left_dark(self):
        """An inner contour flips parity back to empty."""
        segments = square_segments(0, 0, 10, 10) + square_segments(3, 3, 7, 7)
        mask = rasterize(segments, 10, 10, 1.0)

        assert mask.bits[5, 1] == 1
        assert mask.bits[5, 5] == 0

    def test_odd_crossing_row_stays_empty(self):
        """A lone edge gives one crossing per row and no fill."""
        mask = rasterize([Segment2D((2.0, 0.0), (2.0, 5.0))], 5, 5, 1.0)
        assert mask.lit_count == 0

    def test_fill_clamped_to_grid(self):
        mask = rasterize(square_segments(-5, -5, 50, 50), 4, 3, 1.0)
        assert mask.lit_count == 12

    def test_no_segments(self):
        assert rasterize([], 3, 3, 1.0).lit_count == 0

    def test_odd_crossing_rows_left_empty(self):
        """A stray open edge gives three crossings per row; no partial span is drawn."""
        segs = square_segments(1, 1, 4, 4) + [Segment2D((6, 0), (6, 5))]
        mask = rasterize(segs, 8, 5, 1.0)

        assert mask.lit_count == 0

    def test_even_rows_still_filled_beside_odd_rows(self):
        """Only the rows crossed an odd number of times are blanked."""
        segs = square_segments(1, 1, 4, 4) + [Segment2D((6, 0), (6, 2))]
        mask = rasterize(segs, 8, 5, 1.0)

        assert mask.bits[1].sum() == 0
        np.testing.assert_array_equal(mask.bits[2], [0, 1, 1, 1, 0, 0, 0, 0])
        np.testing.assert_array_equal(mask.bits[3], [0, 1, 1, 1, 0, 0, 0, 0])
