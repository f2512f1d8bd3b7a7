"""Per-segment intersection sets.

``build_intersections(segments)[i]`` lists the distinct points (under
tolerance equality) where some other segment meets segment ``i``, in the
order the partner segments were processed.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import EPS_PARALLEL, EPS_POINT
from .geometry import Point, Segment, contains_point
from .intersection import intersect, pairwise_intersections
from .logging_utils import get_logger
from .stats import SearchStats

__all__ = ['build_intersections', 'iter_pair_intersections', 'add_unique_point']

logger = get_logger('segtri.graph')


def add_unique_point(points: List[Point], pt: Point, tol: float = EPS_POINT) -> bool:
    """Append `pt` unless a tolerance-equal point is already present."""
    if contains_point(points, pt, tol):
        return False
    points.append(pt)
    return True


def iter_pair_intersections(segments: Sequence[Segment], parallel_tol: float = EPS_PARALLEL,
                            vectorized: bool = True) -> Iterable[Tuple[int, int, Point]]:
    """Yield (i, j, point) for every intersecting pair i < j, in i-major order."""
    if vectorized:
        yield from pairwise_intersections(segments, parallel_tol)
        return
    n = len(segments)
    for i in range(n - 1):
        for j in range(i + 1, n):
            pt = intersect(segments[i], segments[j], parallel_tol)
            if pt is not None:
                yield i, j, pt


def build_intersections(segments: Sequence[Segment], tol: float = EPS_POINT,
                        parallel_tol: float = EPS_PARALLEL,
                        vectorized: bool = True,
                        stats: Optional[SearchStats] = None) -> List[List[Point]]:
    """Intersection sets for every segment; counters go to `stats` when given."""
    intersects: List[List[Point]] = [[] for _ in segments]
    n_pairs = 0
    for i, j, pt in iter_pair_intersections(segments, parallel_tol, vectorized):
        n_pairs += 1
        add_unique_point(intersects[i], pt, tol)
        add_unique_point(intersects[j], pt, tol)
    if stats is not None:
        stats.intersecting_pairs += n_pairs
        stats.points_recorded += sum(len(p) for p in intersects)
    logger.debug('intersections: %d segments, %d intersecting pairs, %d points recorded',
                 len(segments), n_pairs, sum(len(p) for p in intersects))
    return intersects
