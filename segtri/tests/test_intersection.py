"""Tests for segment-segment intersection (scalar and vectorized)."""
import numpy as np
import pytest

from segtri.core.geometry import Point, Segment
from segtri.core.intersection import (
    intersect, intersect_points, pairwise_intersections, segments_to_array,
)


def seg(*c):
    return Segment.from_coords(*c)


def test_crossing_diagonals():
    pt = intersect(seg(0, 0, 2, 2), seg(0, 2, 2, 0))
    assert pt is not None
    assert pt.as_tuple() == (1.0, 1.0)


def test_parallel_disjoint():
    assert intersect(seg(0, 0, 1, 0), seg(2, 0, 3, 0)) is None


def test_parallel_offset():
    assert intersect(seg(0, 0, 4, 4), seg(0, 1, 4, 5)) is None


def test_collinear_overlapping_rejected():
    assert intersect(seg(0, 0, 2, 0), seg(1, 0, 3, 0)) is None


@pytest.mark.parametrize("other", [
    (1, 1, 5, 3),   # shares first endpoint
    (3, 0, 1, 1),   # shares first endpoint, reversed
])
def test_shared_endpoint_counts(other):
    pt = intersect(seg(1, 1, 4, 4), seg(*other))
    assert pt == Point(1, 1)


def test_shared_far_endpoint():
    pt = intersect(seg(0, 0, 4, 0), seg(4, 0, 2, 4))
    assert pt.as_tuple() == (4.0, 0.0)


def test_t_type_touch():
    # endpoint of second segment lies in the middle of the first
    pt = intersect(seg(0, 0, 4, 0), seg(2, 0, 2, 3))
    assert pt == Point(2, 0)


def test_lines_cross_outside_segments():
    # infinite lines meet at (3, 3), outside the first segment
    assert intersect(seg(0, 0, 2, 2), seg(3, 0, 3, 5)) is None
    # ... and outside the second segment
    assert intersect(seg(0, 0, 5, 5), seg(3, 4, 3, 8)) is None


def test_zero_length_segment_is_no_intersection():
    assert intersect(seg(1, 1, 1, 1), seg(0, 0, 2, 2)) is None
    assert intersect(seg(1, 1, 1, 1), seg(0, 2, 2, 0)) is None


def test_symmetric_in_arguments():
    a, b = seg(5, 1, 1, 9), seg(3, 5, 7, 5)
    p, q = intersect(a, b), intersect(b, a)
    assert p is not None and q is not None
    assert p == q == Point(3, 5)


def test_parallel_tolerance_argument():
    a = seg(0, 0, 10, 0)
    b = seg(0, -1, 10, 1)  # denom = 20
    assert intersect(a, b) == Point(5, 0)
    assert intersect(a, b, tol=50.0) is None


def test_intersect_points_matches_intersect():
    a, b = seg(4, 3, 7, 9), seg(6, 3, 3, 9)
    assert intersect_points(a.p1, a.p2, b.p1, b.p2) == intersect(a, b)


def test_segments_to_array():
    arr = segments_to_array([seg(1, 2, 3, 4), seg(5, 6, 7, 8)])
    assert arr.shape == (2, 4) and arr.dtype == np.float64
    assert arr[1].tolist() == [5.0, 6.0, 7.0, 8.0]
    assert segments_to_array([]).shape == (0, 4)


class TestPairwise:

    def test_empty_and_single(self):
        assert pairwise_intersections([]) == []
        assert pairwise_intersections([seg(0, 0, 1, 1)]) == []

    def test_order_and_values_match_scalar(self, ref_segments):
        vec = pairwise_intersections(ref_segments)
        scalar = []
        n = len(ref_segments)
        for i in range(n - 1):
            for j in range(i + 1, n):
                pt = intersect(ref_segments[i], ref_segments[j])
                if pt is not None:
                    scalar.append((i, j, pt))
        assert [(i, j) for i, j, _ in vec] == [(i, j) for i, j, _ in scalar]
        for (_, _, p), (_, _, q) in zip(vec, scalar):
            assert p.as_tuple() == q.as_tuple()

    def test_parallel_pairs_skipped_without_warnings(self):
        segs = [seg(0, 0, 1, 0), seg(2, 0, 3, 0), seg(0, 1, 1, 1)]
        with np.errstate(all='raise'):
            assert pairwise_intersections(segs) == []
