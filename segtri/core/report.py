"""Plain-text report of a triangle search.

Coordinates use general number formatting (six significant digits, no
trailing zeros) right-justified to the configured width::

    Line segments
    (  5,   1), (  9,   9)
    ...

    Triangles
    (  5,   1), (  4,   3), (  6,   3)
    ...

    There are 27 triangle(s) found.
"""
from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .config import ReportConfig
from .geometry import Point, Segment, Triangle
from .stats import SearchStats, format_stats_table


def format_point(pt: Point, width: int = 3) -> str:
    return f"({pt.x:{width}g}, {pt.y:{width}g})"


def format_segment(seg: Segment, width: int = 3) -> str:
    return ", ".join(format_point(p, width) for p in (seg.p1, seg.p2))


def format_triangle(tri: Triangle, width: int = 3) -> str:
    return ", ".join(format_point(p, width) for p in tri.vertices)


def render_report(segments: Sequence[Segment], triangles: Sequence[Triangle],
                  config: Optional[ReportConfig] = None,
                  stats: Optional[SearchStats] = None) -> str:
    cfg = config or ReportConfig()
    w = cfg.field_width
    lines: List[str] = ["Line segments"]
    lines += [format_segment(s, w) for s in segments]
    lines += ["", "Triangles"]
    lines += [format_triangle(t, w) for t in triangles]
    lines += ["", f"There are {len(triangles)} triangle(s) found."]
    if cfg.show_stats and stats is not None:
        lines += ["", "Statistics", format_stats_table(stats.to_dict())]
    return "\n".join(lines) + "\n"


def print_report(segments, triangles, config=None, stats=None, file=None):
    out = file or sys.stdout
    out.write(render_report(segments, triangles, config, stats))


__all__ = ['format_point', 'format_segment', 'format_triangle', 'render_report', 'print_report']
