"""Tests for boustrophedon hatch generation."""

import pytest

from stratum.errors import ConfigError
from stratum.geometry_kernel import HatchLine, Segment2D
from stratum.path_planner import generate_hatch


def square_segments(x0, y0, x1, y1):
    return [
        Segment2D((x0, y0), (x1, y0)),
        Segment2D((x1, y0), (x1, y1)),
        Segment2D((x1, y1), (x0, y1)),
        Segment2D((x0, y1), (x0, y0)),
    ]


class TestGenerateHatch:
    """Tests for scanline fill vectors."""

    def test_direction_alternates(self):
        """Lines go left to right, then right to left."""
        lines = generate_hatch(square_segments(0, 0, 4, 4), 1.0)

        assert [line.start[1] for line in lines] == pytest.approx([1.0, 2.0, 3.0, 4.0])
        assert lines[0] == HatchLine((0.0, 1.0), (4.0, 1.0))
        assert lines[1] == HatchLine((4.0, 2.0), (0.0, 2.0))
        assert lines[2].start[0] < lines[2].end[0]
        assert lines[3].start[0] > lines[3].end[0]

    def test_reverse_pass_visits_spans_right_to_left(self):
        """Within a reversed scanline, the rightmost span comes first."""
        segments = square_segments(0, 0, 2, 2) + square_segments(4, 0, 6, 2)
        lines = generate_hatch(segments, 1.0)

        assert lines == [
            HatchLine((0.0, 1.0), (2.0, 1.0)),
            HatchLine((4.0, 1.0), (6.0, 1.0)),
            HatchLine((6.0, 2.0), (4.0, 2.0)),
            HatchLine((2.0, 2.0), (0.0, 2.0)),
        ]

    def test_odd_scanline_skipped_without_flipping(self):
        """An odd crossing count drops the whole scanline; direction holds."""
        segments = square_segments(0, 0, 4, 4) + [Segment2D((10.0, 1.5), (10.0, 2.5))]
        lines = generate_hatch(segments, 1.0)

        assert [line.start[1] for line in lines] == pytest.approx([1.0, 3.0, 4.0])
        assert lines[0].start[0] < lines[0].end[0]
        assert lines[1].start[0] > lines[1].end[0]
        assert lines[2].start[0] < lines[2].end[0]

    def test_single_edge_emits_nothing(self):
        assert generate_hatch([Segment2D((2.0, 0.0), (2.0, 5.0))], 0.5) == []

    def test_empty_layer(self):
        assert generate_hatch([], 1.0) == []

    @pytest.mark.parametrize("pitch", [0.0, -1.0])
    def test_non_positive_pitch(self, pitch):
        with pytest.raises(ConfigError):
            generate_hatch(square_segments(0, 0, 1, 1), pitch)
