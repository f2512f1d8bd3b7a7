import importlib.util
import pathlib

DEMO = pathlib.Path(__file__).resolve().parents[2] / "demos" / "random_segments_demo.py"


def load_demo():
    spec = importlib.util.spec_from_file_location("random_segments_demo", DEMO)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_run_trials_returns_last_result():
    demo = load_demo()
    result = demo.run_trials(count=8, trials=2, seed=1)
    assert result is not None
    assert len(result.segments) == 8
    # repeated vertex sets are removed by default
    assert result.stats.triangles_reported == len(result.triangles)


def test_zero_trials():
    assert load_demo().run_trials(count=5, trials=0, seed=0) is None
