"""Segment-segment intersection via the parametric line-line formula.

For segment A-B and segment C-D, with A=(x1,y1), B=(x2,y2), C=(x3,y3), D=(x4,y4)::

    denom = (x1-x2)(y3-y4) - (y1-y2)(x3-x4)
    t     = ((x1-x3)(y3-y4) - (y1-y3)(x3-x4)) / denom
    u     = ((x1-x3)(y1-y2) - (y1-y3)(x1-x2)) / denom
    P     = (x1 + t(x2-x1), y1 + t(y2-y1))

The segments meet when |denom| >= tol and both t and u lie in the closed
interval [0, 1]. Parallel and coincident segments are reported as not
intersecting; overlapping collinear segments get no special treatment.

The scalar and vectorized entry points evaluate the same expressions in the
same order, so they agree bit for bit on float64 input.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .constants import EPS_PARALLEL
from .geometry import Point, Segment

__all__ = ['intersect', 'intersect_points', 'segments_to_array', 'pairwise_intersections']


def intersect_points(a: Point, b: Point, c: Point, d: Point,
                     tol: float = EPS_PARALLEL) -> Optional[Point]:
    """Intersection of segment a-b with segment c-d, or None."""
    x1, y1 = a.x, a.y
    x2, y2 = b.x, b.y
    x3, y3 = c.x, c.y
    x4, y4 = d.x, d.y

    x1_x2 = x1 - x2
    x1_x3 = x1 - x3
    x3_x4 = x3 - x4
    y1_y2 = y1 - y2
    y1_y3 = y1 - y3
    y3_y4 = y3 - y4

    denom = x1_x2 * y3_y4 - y1_y2 * x3_x4
    if abs(denom) < tol:
        return None

    t = (x1_x3 * y3_y4 - y1_y3 * x3_x4) / denom
    if t < 0 or t > 1:
        return None

    u = (x1_x3 * y1_y2 - y1_y3 * x1_x2) / denom
    if u < 0 or u > 1:
        return None

    return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def intersect(s1: Segment, s2: Segment, tol: float = EPS_PARALLEL) -> Optional[Point]:
    return intersect_points(s1.p1, s1.p2, s2.p1, s2.p2, tol)


def segments_to_array(segments: Sequence[Segment]) -> np.ndarray:
    """Pack segments into an (N, 4) float64 array of x1, y1, x2, y2 rows."""
    if not segments:
        return np.empty((0, 4), dtype=np.float64)
    return np.asarray([s.coords() for s in segments], dtype=np.float64)


def pairwise_intersections(segments: Sequence[Segment],
                           tol: float = EPS_PARALLEL) -> List[Tuple[int, int, Point]]:
    """Vectorized intersection of every pair i < j.

    Returns (i, j, point) triples for the intersecting pairs, ordered by i
    then j, which is the order a nested scalar loop visits them.
    """
    n = len(segments)
    if n < 2:
        return []
    seg = segments_to_array(segments)
    ii, jj = np.triu_indices(n, k=1)
    x1 = seg[ii, 0]; y1 = seg[ii, 1]; x2 = seg[ii, 2]; y2 = seg[ii, 3]
    x3 = seg[jj, 0]; y3 = seg[jj, 1]; x4 = seg[jj, 2]; y4 = seg[jj, 3]

    x1_x2 = x1 - x2
    x1_x3 = x1 - x3
    x3_x4 = x3 - x4
    y1_y2 = y1 - y2
    y1_y3 = y1 - y3
    y3_y4 = y3 - y4

    denom = x1_x2 * y3_y4 - y1_y2 * x3_x4
    valid = np.abs(denom) >= tol
    # rejected rows may divide by zero; they are masked out below
    with np.errstate(divide='ignore', invalid='ignore'):
        t = (x1_x3 * y3_y4 - y1_y3 * x3_x4) / denom
        u = (x1_x3 * y1_y2 - y1_y3 * x1_x2) / denom
        px = x1 + t * (x2 - x1)
        py = y1 + t * (y2 - y1)
        valid &= (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)

    hits = np.nonzero(valid)[0]
    return [(int(ii[h]), int(jj[h]), Point(float(px[h]), float(py[h]))) for h in hits]
