"""Central numerical tolerances for segment intersection and triangle search.

All comparisons are absolute, not relative. Keep literals here so they can be
tuned consistently and referenced without scattering them across modules.
"""
from __future__ import annotations

# Point equality: |dx| < EPS_POINT and |dy| < EPS_POINT
EPS_POINT: float = 1e-5
# Line-line denominator below this magnitude means parallel or coincident
EPS_PARALLEL: float = 1e-5

# Minimum absolute triangle area kept when degenerate triangles are dropped
EPS_AREA: float = 1e-12

__all__ = [
    'EPS_POINT',
    'EPS_PARALLEL',
    'EPS_AREA',
]
