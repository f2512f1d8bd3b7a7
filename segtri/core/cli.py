"""Command line entry point: ``python -m segtri``.

Without ``--segments`` the built-in reference scenario is searched and the
report is printed to stdout.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import ReportConfig, SearchConfig
from .constants import EPS_PARALLEL, EPS_POINT
from .driver import find_segment_triangles
from .io import load_segments
from .logging_utils import configure_logging, get_logger
from .report import print_report
from .scenarios import reference_segments

log = get_logger('segtri.cli')


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='segtri',
                                description='Find triangles formed by intersecting line segments.')
    p.add_argument('--segments', metavar='FILE', default=None,
                   help='JSON file of [x1, y1, x2, y2] rows (default: built-in reference scenario)')
    p.add_argument('--unique', action='store_true',
                   help='report each vertex set only once')
    p.add_argument('--drop-degenerate', action='store_true',
                   help='drop zero-area triangles')
    p.add_argument('--scalar', action='store_true',
                   help='evaluate segment pairs one at a time instead of with numpy')
    p.add_argument('--tolerance', type=float, default=EPS_POINT,
                   help='absolute per-coordinate point equality tolerance (default: %(default)g)')
    p.add_argument('--parallel-tolerance', type=float, default=EPS_PARALLEL,
                   help='segment pairs whose line-line denominator is smaller than this '
                        'are treated as parallel (default: %(default)g)')
    p.add_argument('--plot', metavar='PNG', default=None,
                   help='also write a picture of segments and triangles')
    p.add_argument('--stats', action='store_true', help='append search statistics to the report')
    p.add_argument('--log-level', default='WARNING',
                   help='logging level for the segtri logger family (default: %(default)s)')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.segments:
        try:
            segments = load_segments(args.segments)
        except (OSError, ValueError) as e:
            log.error('Cannot read segments from %s: %s', args.segments, e)
            return 1
        log.info('Loaded %d segments from %s', len(segments), args.segments)
    else:
        segments = reference_segments()

    cfg = SearchConfig(
        tolerance=args.tolerance,
        parallel_tolerance=args.parallel_tolerance,
        vectorized=not args.scalar,
        unique=args.unique,
        drop_degenerate=args.drop_degenerate,
    )
    result = find_segment_triangles(segments, cfg)
    print_report(result.segments, result.triangles,
                 ReportConfig(show_stats=args.stats), result.stats)

    if args.plot:
        from .visualization import plot_segments
        plot_segments(result.segments, result.triangles, result.intersects, outname=args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
