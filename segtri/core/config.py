"""Configuration objects for triangle search runs and report rendering."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import EPS_AREA, EPS_PARALLEL, EPS_POINT


@dataclass
class SearchConfig:
    """Options for :func:`segtri.core.driver.find_segment_triangles`.

    Attributes
    ----------
    tolerance : float
        Absolute per-coordinate tolerance for point equality.
    parallel_tolerance : float
        Denominators smaller than this (in magnitude) mean "no intersection".
    vectorized : bool
        Evaluate all segment pairs with numpy in one pass instead of one
        scalar call per pair. Both paths give identical results.
    unique : bool
        Drop triangles whose vertex set was already reported.
    drop_degenerate : bool
        Drop triangles with area below ``min_triangle_area``.
    min_triangle_area : float
        Threshold used when ``drop_degenerate`` is set.

    The defaults reproduce the reference output unchanged.
    """
    tolerance: float = EPS_POINT
    parallel_tolerance: float = EPS_PARALLEL
    vectorized: bool = True
    unique: bool = False
    drop_degenerate: bool = False
    min_triangle_area: float = EPS_AREA


@dataclass
class ReportConfig:
    field_width: int = 3
    show_stats: bool = False


__all__ = ['SearchConfig', 'ReportConfig']
