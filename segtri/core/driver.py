"""End-to-end triangle search: segments -> intersection sets -> triangles."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import SearchConfig
from .geometry import Point, Segment, Triangle
from .graph import build_intersections
from .logging_utils import get_logger
from .stats import SearchStats
from .triangles import drop_degenerate, find_triangles, unique_triangles

logger = get_logger('segtri.driver')


@dataclass
class SearchResult:
    segments: List[Segment]
    intersects: List[List[Point]]
    triangles: List[Triangle]
    stats: SearchStats = field(default_factory=SearchStats)


def find_segment_triangles(segments: Sequence[Segment],
                           config: Optional[SearchConfig] = None) -> SearchResult:
    """Find every triangle closed by three mutually intersecting segments.

    With the default configuration the triangle list is exactly what the
    plain nested search produces, repeated vertex sets included.
    """
    cfg = config or SearchConfig()
    segs = list(segments)
    n = len(segs)
    stats = SearchStats(segments=n, pairs_tested=n * (n - 1) // 2)

    t0 = time.perf_counter()
    intersects = build_intersections(segs, cfg.tolerance, cfg.parallel_tolerance,
                                     cfg.vectorized, stats=stats)
    stats.time_intersections = time.perf_counter() - t0
    logger.debug('intersection pass: %.3f ms (vectorized=%s)',
                 stats.time_intersections * 1000.0, cfg.vectorized)

    t1 = time.perf_counter()
    triangles = find_triangles(intersects, cfg.tolerance)
    stats.triangles_found = len(triangles)
    if cfg.unique:
        before = len(triangles)
        triangles = unique_triangles(triangles, cfg.tolerance)
        stats.duplicates_removed = before - len(triangles)
    if cfg.drop_degenerate:
        before = len(triangles)
        triangles = drop_degenerate(triangles, cfg.min_triangle_area)
        stats.degenerate_removed = before - len(triangles)
    stats.time_triangles = time.perf_counter() - t1
    logger.debug('triangle pass: %.3f ms', stats.time_triangles * 1000.0)

    logger.info('%d segments: %d intersecting pairs, %d triangles (%d duplicate, %d degenerate removed)',
                n, stats.intersecting_pairs, len(triangles),
                stats.duplicates_removed, stats.degenerate_removed)
    return SearchResult(segments=segs, intersects=intersects, triangles=triangles, stats=stats)


__all__ = ['SearchResult', 'find_segment_triangles']
