#!/usr/bin/env python3
"""
Demo: search random segment sets for triangles.

Draw `--count` random segments per trial, run the triangle search with
repeated vertex sets removed, log a summary line per trial and write a PNG
of the last trial.
"""
from __future__ import annotations

import argparse

from segtri.core.config import SearchConfig
from segtri.core.driver import find_segment_triangles
from segtri.core.logging_utils import configure_logging, get_logger
from segtri.core.scenarios import random_segments
from segtri.core.stats import format_stats_table
from segtri.core.visualization import plot_segments

log = get_logger('segtri.demo.random')


def run_trials(count: int, trials: int, seed: int, unique: bool = True):
    cfg = SearchConfig(unique=unique)
    result = None
    for k in range(trials):
        result = find_segment_triangles(random_segments(count, seed=seed + k), cfg)
        st = result.stats
        log.info('trial %d: %d intersecting pairs, %d triangles (%d repeated)',
                 k, st.intersecting_pairs, len(result.triangles), st.duplicates_removed)
    return result


def main():
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument('--count', type=int, default=15)
    p.add_argument('--trials', type=int, default=5)
    p.add_argument('--seed', type=int, default=0)
    p.add_argument('--keep-repeats', action='store_true', help='do not remove repeated vertex sets')
    p.add_argument('--out', default='random_segments.png')
    p.add_argument('--log-level', default='INFO')
    args = p.parse_args()
    configure_logging(args.log_level)

    result = run_trials(args.count, args.trials, args.seed, unique=not args.keep_repeats)
    if result is None:
        return
    log.info('last trial stats:\n%s', format_stats_table(result.stats.to_dict()))
    plot_segments(result.segments, result.triangles, result.intersects, outname=args.out)


if __name__ == '__main__':
    main()
