from segtri.core.scenarios import REFERENCE_COORDS, random_segments, reference_segments


def test_reference_segments():
    segs = reference_segments()
    assert len(segs) == 12
    assert [s.coords() for s in segs] == [tuple(float(v) for v in c) for c in REFERENCE_COORDS]
    # fresh list on every call
    assert reference_segments() is not segs


def test_random_segments_deterministic():
    a = random_segments(8, seed=3)
    b = random_segments(8, seed=3)
    c = random_segments(8, seed=4)
    assert len(a) == 8
    assert [s.coords() for s in a] == [s.coords() for s in b]
    assert [s.coords() for s in a] != [s.coords() for s in c]
    assert all(0.0 <= v <= 5.0 for s in random_segments(20, scale=5.0) for v in s.coords())
