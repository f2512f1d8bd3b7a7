"""Search statistics data structures and presentation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class SearchStats:
    segments: int = 0
    pairs_tested: int = 0
    intersecting_pairs: int = 0
    # Sum over segments of distinct points per segment
    points_recorded: int = 0
    triangles_found: int = 0
    duplicates_removed: int = 0
    degenerate_removed: int = 0
    # Timing (seconds)
    time_intersections: float = 0.0
    time_triangles: float = 0.0

    @property
    def triangles_reported(self) -> int:
        return self.triangles_found - self.duplicates_removed - self.degenerate_removed

    @property
    def time_total(self) -> float:
        return self.time_intersections + self.time_triangles

    def to_dict(self) -> Dict[str, Any]:
        return {
            'segments': self.segments,
            'pairs_tested': self.pairs_tested,
            'intersecting_pairs': self.intersecting_pairs,
            'points_recorded': self.points_recorded,
            'triangles_found': self.triangles_found,
            'duplicates_removed': self.duplicates_removed,
            'degenerate_removed': self.degenerate_removed,
            'triangles_reported': self.triangles_reported,
            'hit_rate': (self.intersecting_pairs / self.pairs_tested) if self.pairs_tested else 0.0,
            'time_intersections': self.time_intersections,
            'time_triangles': self.time_triangles,
            'time_total': self.time_total,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable two-column table summarizing search stats."""
    if not stats_dict:
        return "<no stats>"
    rows = []
    for key, value in stats_dict.items():
        if key.startswith('time_'):
            rows.append([key.replace('time_', '') + '_ms', f"{value * 1000.0:.3f}"])
        elif isinstance(value, float):
            rows.append([key, f"{value * 100.0:.2f}%"])
        else:
            rows.append([key, str(value)])
    w_key = max(len(r[0]) for r in rows)
    w_val = max(len(r[1]) for r in rows)
    lines = [r[0].ljust(w_key) + " " + r[1].rjust(w_val) for r in rows]
    return "\n".join(["-" * (w_key + w_val + 1)] + lines)


__all__ = ['SearchStats', 'format_stats_table']
