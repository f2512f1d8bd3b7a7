"""Public package API for segtri.

Finds the triangles closed by three mutually intersecting line segments.
This facade provides a flat import surface over the internal
implementation package ``segtri.core`` while deferring the matplotlib
import (visualization) until first use to keep ``import segtri`` fast.

Example
-------
    from segtri import Segment, find_segment_triangles

    segs = [Segment.from_coords(0, 0, 4, 0),
            Segment.from_coords(4, 0, 2, 4),
            Segment.from_coords(2, 4, 0, 0)]
    result = find_segment_triangles(segs)
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("segtri")  # populated when installed
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('segtri.core.constants')
_geom = _imp('segtri.core.geometry')
_isect = _imp('segtri.core.intersection')
_graph = _imp('segtri.core.graph')
_tris = _imp('segtri.core.triangles')
_driver = _imp('segtri.core.driver')
_config = _imp('segtri.core.config')
_stats = _imp('segtri.core.stats')
_io = _imp('segtri.core.io')
_report = _imp('segtri.core.report')
_scen = _imp('segtri.core.scenarios')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':  # unset slot, module not imported yet
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-backed module
visualization = _lazy_module('segtri.core.visualization')

# Primitives
Point = _geom.Point
Segment = _geom.Segment
Triangle = _geom.Triangle
approx_equal = _geom.approx_equal
contains_point = _geom.contains_point

# Tolerances
EPS_POINT = _const.EPS_POINT
EPS_PARALLEL = _const.EPS_PARALLEL
EPS_AREA = _const.EPS_AREA

# Algorithm stages
intersect = _isect.intersect
build_intersections = _graph.build_intersections
find_triangles = _tris.find_triangles
unique_triangles = _tris.unique_triangles
find_segment_triangles = _driver.find_segment_triangles
SearchResult = _driver.SearchResult
SearchConfig = _config.SearchConfig
ReportConfig = _config.ReportConfig
SearchStats = _stats.SearchStats

# I/O and presentation
load_segments = _io.load_segments
save_segments = _io.save_segments
render_report = _report.render_report
reference_segments = _scen.reference_segments

# Namespace submodules for exploratory users
constants = _const
geometry = _geom
intersection = _isect
graph = _graph
triangles = _tris
driver = _driver
config = _config
stats = _stats
io = _io
report = _report
scenarios = _scen

__all__ = [
    '__version__',
    # primitives
    'Point', 'Segment', 'Triangle', 'approx_equal', 'contains_point',
    # tolerances
    'EPS_POINT', 'EPS_PARALLEL', 'EPS_AREA',
    # algorithm
    'intersect', 'build_intersections', 'find_triangles', 'unique_triangles',
    'find_segment_triangles', 'SearchResult', 'SearchConfig', 'ReportConfig', 'SearchStats',
    # io / presentation
    'load_segments', 'save_segments', 'render_report', 'reference_segments',
    # submodules / namespaces
    'constants', 'geometry', 'intersection', 'graph', 'triangles', 'driver',
    'config', 'stats', 'io', 'report', 'scenarios', 'visualization',
]
