"""Per-run sweep statistics and a small text presentation helper."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SweepStats:
    events_total: int = 0
    events_processed: int = 0
    predicate_calls: int = 0
    intersection_tests: int = 0
    max_active: int = 0
    # Where the sweep stopped; None when no pair was found
    hit_kind: Optional[str] = None
    hit_x: Optional[int] = None
    # Timing (seconds)
    time_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'events_total': self.events_total,
            'events_processed': self.events_processed,
            'predicate_calls': self.predicate_calls,
            'intersection_tests': self.intersection_tests,
            'max_active': self.max_active,
            'hit_kind': self.hit_kind,
            'hit_x': self.hit_x,
            'time_total': self.time_total,
            'events_skipped': self.events_total - self.events_processed,
            'tests_per_event': (self.intersection_tests / self.events_processed) if self.events_processed else 0.0,
        }


def format_stats(stats: SweepStats) -> str:
    """Return a human readable two-column table of the run statistics."""
    d = stats.to_dict()
    rows = [
        ('events', f"{d['events_processed']}/{d['events_total']}"),
        ('predicate calls', str(d['predicate_calls'])),
        ('intersection tests', str(d['intersection_tests'])),
        ('tests/event', f"{d['tests_per_event']:.2f}"),
        ('max active', str(d['max_active'])),
        ('hit', 'none' if d['hit_kind'] is None else f"{d['hit_kind']} at x={d['hit_x']}"),
        ('time ms', f"{d['time_total'] * 1000.0:.3f}"),
    ]
    width = max(len(k) for k, _ in rows)
    return "\n".join(f"{k.ljust(width)}  {v}" for k, v in rows)


__all__ = ['SweepStats', 'format_stats']
