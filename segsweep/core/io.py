"""Plain-text segment I/O.

Input format (whitespace separated, line breaks are not significant)::

    N
    x1 y1 x2 y2      <- N times

Output format: ``NO``, or ``YES`` followed by a line with the two 1-based
indices of the reported pair.
"""
from __future__ import annotations

from typing import IO, Iterable, List, Optional, Tuple

from .constants import COORD_LIMIT
from .geometry import Segment
from .logging_utils import get_logger

logger = get_logger('segsweep.io')

__all__ = ['parse_segments', 'load_segments', 'read_segments', 'write_segments', 'format_result']


def _to_int(token: str, position: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Token {position} is not an integer: {token!r}") from None


def parse_segments(text: str, coord_limit: int = COORD_LIMIT) -> List[Segment]:
    """Parse a segment count followed by that many coordinate quadruples.

    Raises
    ------
    ValueError
        On a missing or negative count, non-integer tokens, too few or too
        many coordinates, or a coordinate outside ``[-coord_limit, coord_limit]``.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Empty input: expected a segment count")
    n = _to_int(tokens[0], 1)
    if n < 0:
        raise ValueError(f"Segment count must be non-negative, got {n}")
    expected = 1 + 4 * n
    if len(tokens) < expected:
        raise ValueError(f"Expected {4 * n} coordinates for {n} segments, got {len(tokens) - 1}")
    if len(tokens) > expected:
        raise ValueError(f"Unexpected trailing data after {n} segments: {len(tokens) - expected} extra tokens")

    segments: List[Segment] = []
    for k in range(n):
        base = 1 + 4 * k
        coords = [_to_int(tokens[base + m], base + m + 1) for m in range(4)]
        for c in coords:
            if abs(c) > coord_limit:
                raise ValueError(f"Segment {k + 1}: coordinate {c} exceeds the limit of {coord_limit}")
        segments.append(Segment.from_coords(*coords))
    logger.debug("parsed %d segments", len(segments))
    return segments


def load_segments(stream: IO[str], coord_limit: int = COORD_LIMIT) -> List[Segment]:
    return parse_segments(stream.read(), coord_limit=coord_limit)


def read_segments(filepath: str, coord_limit: int = COORD_LIMIT) -> List[Segment]:
    """Read segments from a text file (see module docstring for the format)."""
    with open(filepath, 'r') as f:
        return load_segments(f, coord_limit=coord_limit)


def write_segments(filepath: str, segments: Iterable[Segment]) -> None:
    """Write segments in the input format, canonical endpoint order."""
    segs = list(segments)
    with open(filepath, 'w') as f:
        f.write(f"{len(segs)}\n")
        for s in segs:
            f.write("{} {} {} {}\n".format(*s.coords()))


def format_result(result: Optional[Tuple[int, int]]) -> str:
    if result is None:
        return "NO"
    i, j = result
    return f"YES\n{i + 1} {j + 1}"
