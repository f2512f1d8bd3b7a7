"""Geometry primitives: points, segments and triangles in the plane.

Point equality is approximate: two points are equal when both coordinate
differences are strictly below a small absolute tolerance. This relation is
reflexive and symmetric but NOT transitive, so points are deliberately
unhashable and membership is always a linear scan (:func:`contains_point`).
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations
from typing import Iterable, Iterator, Sequence, Tuple

from .constants import EPS_POINT

__all__ = [
    'Point', 'Segment', 'Triangle',
    'approx_equal', 'contains_point', 'triangle_area', 'same_vertices',
]


def approx_equal(p: 'Point', q: 'Point', tol: float = EPS_POINT) -> bool:
    return abs(p.x - q.x) < tol and abs(p.y - q.y) < tol


def contains_point(points: Iterable['Point'], pt: 'Point', tol: float = EPS_POINT) -> bool:
    """Return True if some element of `points` is tolerance-equal to `pt`."""
    return any(approx_equal(p, pt, tol) for p in points)


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return approx_equal(self, other)

    # tolerance equality is not transitive; no hash is consistent with it
    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class Segment:
    """Ordered pair of endpoints.

    Segments compare by identity: two entries with identical endpoints are
    still distinct members of an input list.
    """
    p1: Point
    p2: Point

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> 'Segment':
        return cls(Point(float(x1), float(y1)), Point(float(x2), float(y2)))

    def coords(self) -> Tuple[float, float, float, float]:
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)


@dataclass(frozen=True, eq=False)
class Triangle:
    """Three points in discovery order. Vertex order is not canonicalized."""
    p1: Point
    p2: Point
    p3: Point

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.p1, self.p2, self.p3)

    def area(self) -> float:
        return triangle_area(self.p1, self.p2, self.p3)


def triangle_area(p0: Point, p1: Point, p2: Point) -> float:
    """Signed area (positive for counter-clockwise vertex order)."""
    return 0.5 * ((p1.x - p0.x) * (p2.y - p0.y) - (p1.y - p0.y) * (p2.x - p0.x))


def same_vertices(a: Triangle, b: Triangle, tol: float = EPS_POINT) -> bool:
    """True if `b` is a vertex permutation of `a` under tolerance equality."""
    va: Sequence[Point] = a.vertices
    for perm in permutations(b.vertices):
        if all(approx_equal(p, q, tol) for p, q in zip(va, perm)):
            return True
    return False
