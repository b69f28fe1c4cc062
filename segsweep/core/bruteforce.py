"""Pairwise reference scan.

O(n^2) over all segment pairs, vectorized per row with int64 numpy arrays.
Used to cross-check the sweep (CLI ``--verify`` and the property tests); it
is not meant for large inputs.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import Segment, as_segments, segments_intersect, segments_to_array, vectorized_seg_intersect
from .logging_utils import get_logger

logger = get_logger('segsweep.bruteforce')

__all__ = ['intersecting_pairs', 'has_intersection', 'verify_result']


def _pairs_for_row(arr: np.ndarray, i: int) -> np.ndarray:
    """Indices j > i whose segment intersects segment i."""
    rest = arr[i + 1:]
    if rest.shape[0] == 0:
        return np.zeros((0,), dtype=np.int64)
    a = np.broadcast_to(arr[i, 0:2], (rest.shape[0], 2))
    b = np.broadcast_to(arr[i, 2:4], (rest.shape[0], 2))
    hits = vectorized_seg_intersect(a, b, rest[:, 0:2], rest[:, 2:4])
    return np.nonzero(hits)[0] + i + 1


def intersecting_pairs(segments, first_only: bool = False) -> List[Tuple[int, int]]:
    """All pairs ``(i, j)`` with ``i < j`` whose closed segments intersect.

    With ``first_only`` the scan stops at the first row that has a hit and
    returns just that pair.
    """
    segs = as_segments(segments)
    arr = segments_to_array(segs)
    pairs: List[Tuple[int, int]] = []
    for i in range(arr.shape[0] - 1):
        js = _pairs_for_row(arr, i)
        if js.size:
            if first_only:
                return [(i, int(js[0]))]
            pairs.extend((i, int(j)) for j in js)
    logger.debug("pairwise scan: %d segments, %d intersecting pairs", len(segs), len(pairs))
    return pairs


def has_intersection(segments) -> bool:
    return bool(intersecting_pairs(segments, first_only=True))


def verify_result(segments, result: Optional[Tuple[int, int]]) -> bool:
    """Check a sweep answer against the pairwise scan.

    A reported pair must name two distinct valid indices whose segments
    intersect; ``None`` is only correct when no pair intersects at all.
    """
    segs: Sequence[Segment] = as_segments(segments)
    if result is None:
        ok = not has_intersection(segs)
    else:
        i, j = result
        ok = (i != j and 0 <= i < len(segs) and 0 <= j < len(segs)
              and segments_intersect(segs[i], segs[j]))
    if not ok:
        logger.warning("sweep result %r disagrees with pairwise scan", result)
    return ok
