import datetime
import io
import logging
import pathlib

import pytest

from segtri.core.geometry import Segment
from segtri.core.scenarios import reference_segments

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"

@pytest.fixture
def ref_segments():
    return reference_segments()

@pytest.fixture
def literal_triangle():
    """Three segments that are the sides of the triangle (0,0), (4,0), (2,4)."""
    return [
        Segment.from_coords(0, 0, 4, 0),
        Segment.from_coords(4, 0, 2, 4),
        Segment.from_coords(2, 4, 0, 0),
    ]

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the report to the item so fixtures can see the outcome in teardown
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)

@pytest.fixture(autouse=True)
def capture_segtri_logs(request):
    """Capture 'segtri' logging for each test and write it to a file only when
    the test fails.
    """
    log = logging.getLogger('segtri')
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    log.addHandler(handler)
    try:
        yield
    finally:
        log.removeHandler(handler)
        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed" and buf.getvalue():
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n\n".format(request.node.nodeid))
                f.write(buf.getvalue())
