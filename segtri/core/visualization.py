"""Plot segments, their intersection points and the triangles they close."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.patches import Polygon

from .intersection import segments_to_array
from .logging_utils import get_logger

logger = get_logger('segtri.viz')


def plot_segments(segments, triangles=(), intersects=None, outname="triangles.png",
                  title=None, fill_alpha: float = 0.25):
    """Write a PNG of the segments with found triangles filled in.

    Args:
        segments: sequence of Segment
        triangles: sequence of Triangle drawn as translucent filled polygons
        intersects: optional per-segment point lists; points are scattered in black
        outname: output image path
        title: figure title; defaults to the triangle count
        fill_alpha: opacity of triangle fills
    """
    seg = segments_to_array(segments)
    fig, ax = plt.subplots(figsize=(6, 6))
    if seg.shape[0]:
        lines = seg.reshape(-1, 2, 2)
        ax.add_collection(LineCollection(lines, colors=[(0.2, 0.2, 0.7)], linewidths=1.2))
    cmap = plt.get_cmap('tab20')
    for k, tri in enumerate(triangles):
        xy = np.array([p.as_tuple() for p in tri.vertices], dtype=float)
        ax.add_patch(Polygon(xy, closed=True, facecolor=cmap(k % 20), alpha=fill_alpha,
                             edgecolor=(0.85, 0.2, 0.2), linewidth=0.8))
    if intersects:
        pts = np.array([p.as_tuple() for plist in intersects for p in plist], dtype=float)
        if pts.size:
            ax.scatter(pts[:, 0], pts[:, 1], s=10, color='black', zorder=3)
    ax.autoscale_view()
    ax.set_aspect('equal')
    ax.set_title(title if title is not None else f'{len(triangles)} triangle(s)')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.info('Wrote %s', outname)
    return outname


__all__ = ['plot_segments']
