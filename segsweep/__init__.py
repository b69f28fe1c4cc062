"""Public package API for segsweep.

Detects whether any two segments in a set intersect, using an exact-integer
Bentley-Ottmann sweep, and reports one intersecting pair.

Example
-------
    from segsweep import Segment, find_intersection
    segs = [Segment.from_coords(0, 0, 2, 2), Segment.from_coords(0, 2, 2, 0)]
    find_intersection(segs)   # -> (0, 1)

The modules under ``segsweep.core`` hold the implementation; rely on this
layer for public symbols. Plotting is imported lazily so that matplotlib is
only loaded when a figure is requested.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("segsweep")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import COORD_LIMIT
from .core.config import SweepConfig
from .core.geometry import (
    Point, Segment, cross, orientation_sign, segments_intersect,
)
from .core.stats import SweepStats, format_stats
from .core.status import SweepStatus, StatusOrderError
from .core.sweep import find_intersection, YOrder, build_events
from .core.bruteforce import intersecting_pairs, has_intersection, verify_result
from .core.io import parse_segments, read_segments, write_segments, format_result
from .core.logging_utils import configure_logging, get_logger


def plot_segments(*args, **kwargs):
    return _imp('segsweep.core.visualization').plot_segments(*args, **kwargs)


__all__ = [
    '__version__',
    # primitives
    'Point', 'Segment', 'cross', 'orientation_sign', 'segments_intersect',
    # engine
    'find_intersection', 'YOrder', 'build_events', 'SweepStatus', 'StatusOrderError',
    'SweepConfig', 'SweepStats', 'format_stats', 'COORD_LIMIT',
    # reference scan
    'intersecting_pairs', 'has_intersection', 'verify_result',
    # adapters
    'parse_segments', 'read_segments', 'write_segments', 'format_result', 'plot_segments',
    'configure_logging', 'get_logger',
]
