"""Tests for JSON segment files."""
import json

import pytest

from segtri.core.geometry import Segment
from segtri.core.io import load_segments, parse_segments, save_segments


def test_load_list_form(tmp_path):
    f = tmp_path / "segs.json"
    f.write_text(json.dumps([[0, 0, 2, 2], [0, 2, 2, 0.5]]))
    segs = load_segments(f)
    assert [s.coords() for s in segs] == [(0.0, 0.0, 2.0, 2.0), (0.0, 2.0, 2.0, 0.5)]


def test_load_object_form(tmp_path):
    f = tmp_path / "segs.json"
    f.write_text(json.dumps({"segments": [[1, 2, 3, 4]]}))
    assert load_segments(str(f))[0].coords() == (1.0, 2.0, 3.0, 4.0)


def test_roundtrip_preserves_order(tmp_path, ref_segments):
    f = tmp_path / "ref.json"
    save_segments(f, ref_segments)
    loaded = load_segments(f)
    assert [s.coords() for s in loaded] == [s.coords() for s in ref_segments]
    assert "segments" in json.loads(f.read_text())


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_segments(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    f = tmp_path / "bad.json"
    f.write_text("[[0, 0, 1")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_segments(f)


@pytest.mark.parametrize("data, msg", [
    ({"lines": []}, "no 'segments' key"),
    ("0 0 1 1", "Expected a list"),
    ([[0, 0, 1]], "expected 4 coordinates"),
    ([[0, 0, 1, "a"]], "non-numeric"),
    ([[0, 0, 1, True]], "non-numeric"),
    ([[0, 0, 1, float("inf")]], "non-finite"),
    ([[0, 0, 1, 10 ** 400]], "out of range"),
])
def test_malformed_content(data, msg):
    with pytest.raises(ValueError, match=msg):
        parse_segments(data)


def test_empty_list():
    assert parse_segments([]) == []
