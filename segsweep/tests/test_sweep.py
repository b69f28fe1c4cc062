"""Sweep engine tests: fixed scenarios, event order, predicate, stats and a
randomized cross-check against the pairwise scan."""
import logging
import random

import numpy as np
import pytest

from segsweep.core.bruteforce import intersecting_pairs
from segsweep.core.config import SweepConfig
from segsweep.core.constants import COORD_LIMIT, END, START
from segsweep.core.geometry import Segment, segments_intersect
from segsweep.core.stats import SweepStats
from segsweep.core.sweep import Event, YOrder, build_events, find_intersection


def seg(x1, y1, x2, y2):
    return Segment.from_coords(x1, y1, x2, y2)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_crossing_diagonals():
    res = find_intersection([seg(0, 0, 2, 2), seg(0, 2, 2, 0)])
    assert res is not None and sorted(res) == [0, 1]


def test_disjoint_horizontals():
    assert find_intersection([seg(0, 0, 1, 0), seg(2, 5, 3, 5)]) is None


def test_vertical_crosses_horizontal():
    res = find_intersection([seg(5, 0, 5, 10), seg(0, 5, 10, 5)])
    # horizontal is already on the sweep line when the vertical starts
    assert res == (1, 0)


def test_collinear_overlap_counts():
    assert find_intersection([seg(0, 0, 4, 0), seg(2, 0, 6, 0)]) == (0, 1)


def test_three_segments_interleaved_events():
    segs = [seg(0, 0, 10, 0), seg(2, 5, 8, 1), seg(3, 1, 9, 6)]
    assert find_intersection(segs) == (1, 2)
    assert intersecting_pairs(segs) == [(1, 2)]


def test_zero_length_segment_on_line():
    point = seg(5, 5, 5, 5)
    assert point == Segment.from_coords(5, 5, 5, 5)
    assert find_intersection([seg(0, 0, 10, 10), point]) == (0, 1)


def test_zero_length_segment_off_line():
    assert find_intersection([seg(0, 0, 10, 10), seg(5, 6, 5, 6)]) is None


def test_zero_length_segments_same_point():
    assert find_intersection([seg(3, 3, 3, 3), seg(3, 3, 3, 3)]) == (0, 1)


def test_detected_when_segment_ends():
    # 0 and 2 cross at (5, 5) but only become neighbours after 1 leaves
    segs = [seg(0, 0, 10, 10), seg(0, 5, 2, 5), seg(1, 9, 10, 0)]
    stats = SweepStats()
    assert find_intersection(segs, stats=stats) == (2, 0)
    assert stats.hit_kind == 'end' and stats.hit_x == 10


def test_touching_at_shared_sweep_x():
    # one segment ends exactly where the next starts
    assert find_intersection([seg(0, 0, 2, 2), seg(2, 2, 3, 0)]) == (0, 1)


def test_end_then_start_at_same_x_no_touch():
    assert find_intersection([seg(0, 0, 2, 2), seg(2, 3, 4, 3)]) is None


def test_vertical_stack_no_overlap():
    segs = [seg(1, 0, 1, 2), seg(1, 3, 1, 5), seg(1, 6, 1, 6)]
    assert find_intersection(segs) is None


def test_vertical_overlap():
    res = find_intersection([seg(1, 0, 1, 4), seg(1, 3, 1, 5)])
    assert res is not None and sorted(res) == [0, 1]


def test_vertical_between_non_vertical():
    segs = [seg(0, 0, 10, 0), seg(0, 10, 10, 10), seg(5, 2, 5, 8)]
    assert find_intersection(segs) is None
    segs.append(seg(5, 1, 5, 9))
    res = find_intersection(segs)
    assert res is not None and sorted(res) == [2, 3]


def test_empty_and_single():
    assert find_intersection([]) is None
    assert find_intersection([seg(0, 0, 1, 1)]) is None


def test_identical_segments():
    assert find_intersection([seg(0, 0, 3, 1), seg(3, 1, 0, 0)]) == (0, 1)


def test_accepts_rows_and_arrays():
    rows = [(0, 0, 2, 2), (0, 2, 2, 0)]
    assert find_intersection(rows) == (0, 1)
    assert find_intersection(np.array(rows, dtype=np.int64)) == (0, 1)


def test_coordinates_at_limit():
    L = COORD_LIMIT
    segs = [seg(-L, -L, L, L), seg(-L, L, L, -L + 1)]
    assert find_intersection(segs) == (0, 1)
    near_miss = [seg(-L, -L, L, L), seg(-L, L, L - 1, L)]
    assert find_intersection(near_miss) is None


# ---------------------------------------------------------------------------
# Events and ordering predicate
# ---------------------------------------------------------------------------

def test_events_sorted_start_before_end():
    events = build_events([seg(0, 0, 2, 0), seg(3, 1, 2, 1)])
    assert events == [
        Event(0, 0, START),
        Event(1, 2, START),
        Event(0, 2, END),
        Event(1, 3, END),
    ]


def test_events_two_per_segment_for_points():
    events = build_events([seg(4, 4, 4, 4)])
    assert [(e.x, e.kind) for e in events] == [(4, START), (4, END)]


def test_yorder_non_vertical():
    order = YOrder([seg(0, 0, 10, 0), seg(2, 3, 8, 4)])
    assert order.less(0, 1)
    assert not order.less(1, 0)
    assert order.calls == 2


def test_yorder_later_start_below():
    order = YOrder([seg(0, 5, 10, 5), seg(3, 1, 9, 2)])
    assert order.less(1, 0)
    assert not order.less(0, 1)


def test_yorder_vertical_cases():
    segs = [seg(0, 0, 10, 0), seg(5, 2, 5, 8), seg(5, -9, 5, -3), seg(5, 9, 5, 12)]
    order = YOrder(segs)
    assert order.less(0, 1) and not order.less(1, 0)
    assert order.less(2, 0) and not order.less(0, 2)
    # both vertical: compare y ranges
    assert order.less(2, 1) and order.less(1, 3)
    assert not order.less(3, 1)


def test_yorder_touching_is_not_strict():
    order = YOrder([seg(0, 0, 10, 0), seg(4, 0, 6, 3)])
    assert not order.less(0, 1) and not order.less(1, 0)


# ---------------------------------------------------------------------------
# Stats and config
# ---------------------------------------------------------------------------

def test_stats_on_hit():
    stats = SweepStats()
    find_intersection([seg(0, 0, 2, 2), seg(0, 2, 2, 0)], stats=stats)
    assert stats.events_total == 4
    assert stats.events_processed == 2
    assert stats.hit_kind == 'start' and stats.hit_x == 0
    assert stats.intersection_tests >= 1
    assert stats.predicate_calls >= 1
    assert stats.max_active == 1


def test_stats_without_hit():
    stats = SweepStats()
    find_intersection([seg(0, 0, 1, 0), seg(2, 5, 3, 5)], stats=stats)
    assert stats.events_processed == stats.events_total == 4
    assert stats.hit_kind is None and stats.hit_x is None
    assert stats.max_active == 1
    assert stats.time_total >= 0.0


def test_collect_stats_logs(caplog):
    pkg_logger = logging.getLogger('segsweep')
    prev = pkg_logger.propagate
    pkg_logger.propagate = True
    caplog.set_level(logging.INFO, logger='segsweep')
    try:
        find_intersection([seg(0, 0, 1, 0)], config=SweepConfig(collect_stats=True))
    finally:
        pkg_logger.propagate = prev
    assert 'sweep stats' in caplog.text


def test_any_seed_gives_valid_answer():
    rng = random.Random(5)
    segs = [seg(*(rng.randint(0, 30) for _ in range(4))) for _ in range(25)]
    pairs = intersecting_pairs(segs)
    for s in range(5):
        res = find_intersection(segs, config=SweepConfig(seed=s))
        assert (res is None) == (not pairs)
        if res is not None:
            assert segments_intersect(segs[res[0]], segs[res[1]])


# ---------------------------------------------------------------------------
# Cross-check against the pairwise scan
# ---------------------------------------------------------------------------

def _random_segments(rng, n, span):
    return [seg(rng.randint(0, span), rng.randint(0, span), rng.randint(0, span), rng.randint(0, span))
            for _ in range(n)]


def _check_against_pairwise(segs, cfg):
    res = find_intersection(segs, config=cfg)
    pairs = intersecting_pairs(segs)
    assert (res is None) == (not pairs), (segs, res, pairs)
    if res is not None:
        i, j = res
        assert i != j
        assert segments_intersect(segs[i], segs[j])
        assert (min(i, j), max(i, j)) in pairs


@pytest.mark.parametrize("span", [3, 6, 20])
def test_matches_pairwise_scan_small_grids(span):
    rng = random.Random(1000 + span)
    for trial in range(300):
        n = rng.randint(2, 6)
        segs = _random_segments(rng, n, span)
        _check_against_pairwise(segs, SweepConfig(seed=trial, check_invariants=True))


def test_matches_pairwise_scan_with_axis_parallel_segments():
    rng = random.Random(77)
    for trial in range(300):
        segs = []
        for _ in range(rng.randint(2, 7)):
            x, y = rng.randint(0, 8), rng.randint(0, 8)
            kind = rng.random()
            if kind < 0.35:
                segs.append(seg(x, y, x, rng.randint(0, 8)))
            elif kind < 0.7:
                segs.append(seg(x, y, rng.randint(0, 8), y))
            elif kind < 0.8:
                segs.append(seg(x, y, x, y))
            else:
                segs.append(seg(x, y, rng.randint(0, 8), rng.randint(0, 8)))
        _check_against_pairwise(segs, SweepConfig(seed=trial, check_invariants=True))


def test_non_intersecting_horizontals_large():
    rng = random.Random(3)
    segs = []
    for y in range(400):
        x1 = rng.randint(-1000, 1000)
        segs.append(seg(x1, y, x1 + rng.randint(0, 500), y))
    rng.shuffle(segs)
    assert find_intersection(segs) is None


def test_sparse_random_medium():
    rng = random.Random(11)
    for trial in range(20):
        segs = []
        for _ in range(40):
            x, y = rng.randint(0, 10**6), rng.randint(0, 10**6)
            segs.append(seg(x, y, x + rng.randint(-2000, 2000), y + rng.randint(-2000, 2000)))
        _check_against_pairwise(segs, SweepConfig(seed=trial))
