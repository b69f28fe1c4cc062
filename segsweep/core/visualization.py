"""Plotting helper for segment sets and the reported pair."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .geometry import as_segments, segments_to_array
from .logging_utils import get_logger

logger = get_logger('segsweep.viz')

__all__ = ['plot_segments']


def plot_segments(segments, outname="segments.png", highlight=None, title=None, label_indices=None):
    """Draw all segments and emphasize a pair.

    Args:
        segments: Segments, coordinate rows or an (N, 4) array
        outname: output image path
        highlight: optional (i, j) pair of 0-based indices drawn in red
        title: figure title; defaults to a YES/NO summary
        label_indices: write 1-based indices at segment midpoints; defaults to
            True for small inputs only
    """
    arr = segments_to_array(as_segments(segments))
    n = arr.shape[0]
    if label_indices is None:
        label_indices = n <= 40
    fig, ax = plt.subplots(figsize=(6, 6))
    if n:
        # degenerate segments would vanish as zero-length lines
        point_mask = (arr[:, 0] == arr[:, 2]) & (arr[:, 1] == arr[:, 3])
        for k, (x1, y1, x2, y2) in enumerate(arr.tolist()):
            if point_mask[k]:
                ax.scatter([x1], [y1], s=12, color='0.35', zorder=2)
            else:
                ax.plot([x1, x2], [y1, y2], color='0.35', linewidth=1.0, zorder=1)
            if label_indices:
                ax.annotate(str(k + 1), ((x1 + x2) / 2.0, (y1 + y2) / 2.0), fontsize=7, color='0.2')
        if highlight is not None:
            for k in highlight:
                x1, y1, x2, y2 = arr[k].tolist()
                ax.plot([x1, x2], [y1, y2], color=(0.85, 0.2, 0.2), linewidth=2.2, zorder=3)
                if x1 == x2 and y1 == y2:
                    ax.scatter([x1], [y1], s=30, color=(0.85, 0.2, 0.2), zorder=3)
        pad = max(1.0, 0.05 * float(np.ptp(arr[:, [0, 2]]) + np.ptp(arr[:, [1, 3]])))
        ax.set_xlim(arr[:, [0, 2]].min() - pad, arr[:, [0, 2]].max() + pad)
        ax.set_ylim(arr[:, [1, 3]].min() - pad, arr[:, [1, 3]].max() + pad)
    if title is None:
        title = f"{n} segments: " + ('NO' if highlight is None else f"YES {highlight[0] + 1} {highlight[1] + 1}")
    ax.set_title(title)
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("wrote %s", outname)
