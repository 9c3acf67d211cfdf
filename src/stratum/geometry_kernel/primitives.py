# -*- coding: utf-8 -*-
"""
2D primitives produced by slicing and consumed by the toolpath stages.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Segment2D:
    """Undirected edge of one triangle cut at one Z height."""
    p1: Vec2
    p2: Vec2

    @property
    def length(self) -> float:
        return ((self.p2[0] - self.p1[0]) ** 2 + (self.p2[1] - self.p1[1]) ** 2) ** 0.5


@dataclass
class Polygon:
    """
    Stitched contour.

    Attributes:
        points: Ordered vertices. A closed polygon does not repeat its first point.
        closed: True when the last point connects back to the first.
    """
    points: List[Vec2] = field(default_factory=list)
    closed: bool = False

    @property
    def edge_count(self) -> int:
        n = len(self.points)
        return n if self.closed else max(n - 1, 0)

    def edges(self) -> List[Tuple[Vec2, Vec2]]:
        """Consecutive point pairs, including the closing edge when closed."""
        pts = self.points
        pairs = list(zip(pts[:-1], pts[1:]))
        if self.closed and pts:
            pairs.append((pts[-1], pts[0]))
        return pairs


@dataclass(frozen=True)
class HatchLine:
    """One fill vector at constant Y, in travel order."""
    start: Vec2
    end: Vec2
