"""JSON segment files.

Accepted layouts::

    [[x1, y1, x2, y2], ...]
    {"segments": [[x1, y1, x2, y2], ...]}

``save_segments`` always writes the object form.
"""
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, List, Sequence, Union

from .geometry import Segment

__all__ = ['parse_segments', 'load_segments', 'save_segments']

PathLike = Union[str, Path]


def _parse_row(idx: int, row: Any) -> Segment:
    if not isinstance(row, (list, tuple)) or len(row) != 4:
        raise ValueError(f"Segment {idx}: expected 4 coordinates, got {row!r}")
    coords = []
    for value in row:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Segment {idx}: non-numeric coordinate {value!r}")
        try:
            x = float(value)
        except OverflowError as e:
            raise ValueError(f"Segment {idx}: coordinate out of range for a float") from e
        if not math.isfinite(x):
            raise ValueError(f"Segment {idx}: non-finite coordinate {value!r}")
        coords.append(x)
    return Segment.from_coords(*coords)


def parse_segments(data: Any) -> List[Segment]:
    """Build segments from already-decoded JSON data.

    Raises
    ------
    ValueError
        If the top level is neither a list nor an object with a
        ``segments`` list, or if any row is malformed.
    """
    if isinstance(data, dict):
        if 'segments' not in data:
            raise ValueError("Segment object has no 'segments' key")
        data = data['segments']
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of segments, got {type(data).__name__}")
    return [_parse_row(i, row) for i, row in enumerate(data)]


def load_segments(filepath: PathLike) -> List[Segment]:
    """Read segments from a JSON file.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If the content is not valid JSON or not a segment list
    """
    path = Path(filepath)
    text = path.read_text(encoding='utf-8')
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return parse_segments(data)


def save_segments(filepath: PathLike, segments: Sequence[Segment]) -> None:
    payload = {'segments': [list(s.coords()) for s in segments]}
    Path(filepath).write_text(json.dumps(payload, indent=2) + "\n", encoding='utf-8')
