"""Triangle enumeration over per-segment intersection sets.

A triangle is reported for segments i < j < k and points P, Q, R such that

- P lies on segments i and j,
- Q lies on segments j and k, with Q != P,
- R lies on segments k and i, with R != Q.

The search is split into three generator stages (start, middle, closing
vertex) composed in :func:`iter_triangles`. Output order is the order of a
plain nested loop over i, P, j, Q, k, R; vertex order is not canonicalized
and repeated vertex sets are kept unless :func:`unique_triangles` is applied.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .constants import EPS_AREA, EPS_POINT
from .geometry import Point, Triangle, approx_equal, contains_point, same_vertices

__all__ = ['iter_triangles', 'find_triangles', 'unique_triangles', 'drop_degenerate']

Intersects = Sequence[Sequence[Point]]


def _start_vertices(intersects: Intersects) -> Iterator[Tuple[int, Point]]:
    for i in range(len(intersects) - 2):
        for p in intersects[i]:
            yield i, p


def _middle_vertices(intersects: Intersects, i: int, p: Point,
                     tol: float) -> Iterator[Tuple[int, Point]]:
    for j in range(i + 1, len(intersects) - 1):
        if not contains_point(intersects[j], p, tol):
            continue
        for q in intersects[j]:
            if not approx_equal(q, p, tol):
                yield j, q


def _closing_vertices(intersects: Intersects, i: int, j: int, q: Point,
                      tol: float) -> Iterator[Point]:
    for k in range(j + 1, len(intersects)):
        if not contains_point(intersects[k], q, tol):
            continue
        for r in intersects[k]:
            if not approx_equal(r, q, tol) and contains_point(intersects[i], r, tol):
                yield r


def iter_triangles(intersects: Intersects, tol: float = EPS_POINT) -> Iterator[Triangle]:
    for i, p in _start_vertices(intersects):
        for j, q in _middle_vertices(intersects, i, p, tol):
            for r in _closing_vertices(intersects, i, j, q, tol):
                yield Triangle(p, q, r)


def find_triangles(intersects: Intersects, tol: float = EPS_POINT) -> List[Triangle]:
    return list(iter_triangles(intersects, tol))


def unique_triangles(triangles: Sequence[Triangle], tol: float = EPS_POINT) -> List[Triangle]:
    """Keep the first triangle of each vertex set, preserving order."""
    kept: List[Triangle] = []
    for tri in triangles:
        if not any(same_vertices(tri, other, tol) for other in kept):
            kept.append(tri)
    return kept


def drop_degenerate(triangles: Sequence[Triangle], min_area: float = EPS_AREA) -> List[Triangle]:
    return [t for t in triangles if abs(t.area()) >= min_area]
