"""Tests for SweepConfig and SweepStats helpers."""
import json

import pytest

from segsweep.core.config import SweepConfig
from segsweep.core.stats import SweepStats, format_stats


def test_config_defaults():
    cfg = SweepConfig()
    assert cfg.seed == 0
    assert cfg.check_invariants is False
    assert cfg.max_level >= 1


def test_config_json_round_trip():
    cfg = SweepConfig(seed=9, check_invariants=True)
    again = SweepConfig.from_dict(json.loads(json.dumps(cfg.to_dict())))
    assert again == cfg


def test_config_unknown_key():
    with pytest.raises(ValueError, match="bogus"):
        SweepConfig.from_dict({'bogus': 1})


@pytest.mark.parametrize("kwargs", [{'max_level': 0}, {'level_probability': 0.0}, {'level_probability': 1.0}])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        SweepConfig(**kwargs)


def test_stats_to_dict_rates():
    st = SweepStats(events_total=10, events_processed=4, intersection_tests=6)
    d = st.to_dict()
    assert d['events_skipped'] == 6
    assert d['tests_per_event'] == pytest.approx(1.5)


def test_stats_to_dict_empty():
    assert SweepStats().to_dict()['tests_per_event'] == 0.0


def test_format_stats():
    text = format_stats(SweepStats(events_total=4, events_processed=2, hit_kind='start', hit_x=0))
    assert 'events' in text and '2/4' in text
    assert 'start at x=0' in text
    assert 'none' in format_stats(SweepStats())
