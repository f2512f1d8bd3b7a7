"""Built-in segment configurations."""
from __future__ import annotations

from typing import List

import numpy as np

from .geometry import Segment

# Star-like grid on [1, 9] x [1, 9]: four rising diagonals, four falling
# diagonals and four horizontals.
REFERENCE_COORDS = [
    (5, 1, 9, 9),
    (4, 3, 7, 9),
    (3, 5, 5, 9),
    (2, 7, 3, 9),

    (5, 1, 1, 9),
    (6, 3, 3, 9),
    (7, 5, 5, 9),
    (8, 7, 7, 9),

    (4, 3, 6, 3),
    (3, 5, 7, 5),
    (2, 7, 8, 7),
    (1, 9, 9, 9),
]


def reference_segments() -> List[Segment]:
    return [Segment.from_coords(*c) for c in REFERENCE_COORDS]


def random_segments(n: int = 12, seed: int = 0, scale: float = 10.0) -> List[Segment]:
    """`n` segments with endpoints drawn uniformly from [0, scale] x [0, scale]."""
    rng = np.random.RandomState(seed)
    coords = rng.rand(n, 4).astype(np.float64) * float(scale)
    return [Segment.from_coords(*row) for row in coords.tolist()]


__all__ = ['REFERENCE_COORDS', 'reference_segments', 'random_segments']
