"""Bentley-Ottmann sweep for detecting one intersecting pair of segments.

Segments become START/END events sorted by x (START first on ties). A sweep
line visits them left to right while :class:`SweepStatus` keeps the active
segments ordered by height. Only pairs that become adjacent in that order are
ever tested, which gives O(n log n) instead of the O(n^2) pairwise scan.

The run stops at the first detected pair. Until then no two active segments
cross, and that is the only reason the height order stays a valid strict
order while the sweep advances.

Precondition: all coordinates satisfy ``abs(c) <= COORD_LIMIT``. The core
does not check it; :mod:`segsweep.core.io` does.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import SweepConfig
from .constants import START, END
from .geometry import Segment, as_segments, cross, segments_intersect
from .logging_utils import get_logger
from .stats import SweepStats, format_stats
from .status import SweepStatus

logger = get_logger('segsweep.sweep')

__all__ = ['Event', 'YOrder', 'build_events', 'find_intersection']


@dataclass(frozen=True)
class Event:
    index: int
    x: int
    kind: int

    def sort_key(self) -> Tuple[int, int]:
        return (self.x, self.kind)


def build_events(segments: Sequence[Segment]) -> List[Event]:
    """Two events per segment, sorted by x with START before END at equal x."""
    events = []
    for i, s in enumerate(segments):
        events.append(Event(i, s.p1.x, START))
        events.append(Event(i, s.p2.x, END))
    events.sort(key=Event.sort_key)
    return events


class YOrder:
    """Strict "is below" predicate over segment indices.

    ``less(l, r)`` is True when segment ``l`` lies below segment ``r`` where
    both are cut by the sweep line. The answer only holds while neither of the
    two crosses any other active segment, which the sweep guarantees by
    stopping at the first hit. Uses cross products only, no y-at-x division.
    """

    def __init__(self, segments: Sequence[Segment]):
        self.segments = segments
        self.calls = 0

    def __call__(self, l: int, r: int) -> bool:
        return self.less(l, r)

    def less(self, l: int, r: int) -> bool:
        self.calls += 1
        sl = self.segments[l]
        sr = self.segments[r]
        if sl.vertical and sr.vertical:
            return sl.p2.y < sr.p1.y
        if sr.vertical:
            # r's lower end sits left of l's directed line -> l is below
            return cross(sl.p1, sl.p2, sr.p1) > 0
        if sl.vertical:
            return cross(sr.p1, sr.p2, sl.p1) < 0
        # measure against whichever segment started first
        if sl.p1.x > sr.p1.x:
            return cross(sr.p1, sr.p2, sl.p1) < 0
        return cross(sl.p1, sl.p2, sr.p1) > 0


def find_intersection(
    segments,
    config: Optional[SweepConfig] = None,
    stats: Optional[SweepStats] = None,
) -> Optional[Tuple[int, int]]:
    """Return one intersecting pair of segments, or None.

    Parameters
    ----------
    segments : sequence
        :class:`Segment` objects, ``(x1, y1, x2, y2)`` rows, point pairs or an
        (N, 4) integer array. Non-Segment items are canonicalized on the way in.
    config : SweepConfig, optional
        Skip list seed and invariant checking.
    stats : SweepStats, optional
        Filled in place with run counters.

    Returns
    -------
    (i, j) or None
        0-based input positions. ``i`` is the segment already on the sweep
        line, ``j`` the one whose event revealed the intersection. Touching
        and collinear overlap count as intersecting.
    """
    cfg = config or SweepConfig()
    own_stats = stats is None
    st = stats if stats is not None else SweepStats()
    segs = as_segments(segments)
    t0 = time.perf_counter()

    events = build_events(segs)
    order = YOrder(segs)
    status = SweepStatus(seed=cfg.seed, max_level=cfg.max_level,
                         level_probability=cfg.level_probability)
    st.events_total = len(events)
    logger.debug("sweep start: %d segments, %d events", len(segs), len(events))

    def check(other: Optional[int], idx: int) -> bool:
        if other is None:
            return False
        st.intersection_tests += 1
        return segments_intersect(segs[other], segs[idx])

    result = None
    for ev in events:
        st.events_processed += 1
        i = ev.index
        if ev.kind == START:
            below, above = status.locate(i, order.less)
            if check(above, i):
                result = (above, i)
            elif check(below, i):
                result = (below, i)
            else:
                status.insert(i, order.less)
                st.max_active = max(st.max_active, len(status))
                if cfg.check_invariants:
                    status.validate(order.less)
        else:
            below, above = status.neighbors(i)
            if check(below, i):
                result = (below, i)
            elif check(above, i):
                result = (above, i)
            else:
                status.remove(i)
        if result is not None:
            st.hit_kind = 'start' if ev.kind == START else 'end'
            st.hit_x = ev.x
            break

    st.predicate_calls = order.calls
    st.time_total = time.perf_counter() - t0
    if result is None:
        logger.debug("sweep end: no intersection after %d events", st.events_processed)
    else:
        logger.info("segments %d and %d intersect (detected at %s event, x=%d)",
                    result[0], result[1], st.hit_kind, st.hit_x)
    if own_stats and cfg.collect_stats:
        logger.info("sweep stats:\n%s", format_stats(st))
    return result
