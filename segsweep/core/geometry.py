"""Exact integer geometry primitives.

Scalar predicates work on :class:`Point` / :class:`Segment` values and use
Python integers, so they are exact for any input. The vectorized helpers work
on int64 numpy arrays and are exact only while coordinates stay within
``COORD_LIMIT`` (products of differences reach ~4e18 < 2**63).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

__all__ = [
    'Point', 'Segment', 'cross', 'orientation_sign', 'bbox_overlap',
    'segments_intersect', 'orient_vectorized', 'bbox_overlap_vectorized',
    'vectorized_seg_intersect', 'segments_to_array', 'segments_from_array',
    'as_segments',
]


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


PointLike = Union[Point, Tuple[int, int], Sequence[int]]


def _as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(int(x), int(y))


@dataclass(frozen=True)
class Segment:
    """Closed segment with canonical endpoint order.

    After construction ``p1.x <= p2.x`` and, for vertical segments,
    ``p1.y <= p2.y``. Both rules together are plain lexicographic order on
    (x, y), which is what ``__post_init__`` enforces. A zero-length segment
    (p1 == p2) is valid and counts as vertical.
    """
    p1: Point
    p2: Point

    def __post_init__(self):
        p1 = _as_point(self.p1)
        p2 = _as_point(self.p2)
        if (p1.x, p1.y) > (p2.x, p2.y):
            p1, p2 = p2, p1
        object.__setattr__(self, 'p1', p1)
        object.__setattr__(self, 'p2', p2)

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> 'Segment':
        return cls(Point(int(x1), int(y1)), Point(int(x2), int(y2)))

    @property
    def vertical(self) -> bool:
        return self.p1.x == self.p2.x

    @property
    def degenerate(self) -> bool:
        return self.p1 == self.p2

    def coords(self) -> Tuple[int, int, int, int]:
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)


def cross(origin: Point, a: Point, b: Point) -> int:
    """Twice the signed area of triangle (origin, a, b).

    Positive when ``b`` lies to the left of the directed line origin->a,
    negative when it lies to the right, zero when the three are collinear.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (b.x - origin.x) * (a.y - origin.y)


def orientation_sign(origin: Point, a: Point, b: Point) -> int:
    """Sign of :func:`cross` as -1, 0 or +1."""
    det = cross(origin, a, b)
    if det > 0:
        return 1
    if det < 0:
        return -1
    return 0


def bbox_overlap(s1: Segment, s2: Segment) -> bool:
    """True if the closed bounding boxes of the two segments overlap."""
    # canonical form gives p1.x <= p2.x; y has no such guarantee
    if max(s1.p1.x, s2.p1.x) > min(s1.p2.x, s2.p2.x):
        return False
    lo = max(min(s1.p1.y, s1.p2.y), min(s2.p1.y, s2.p2.y))
    hi = min(max(s1.p1.y, s1.p2.y), max(s2.p1.y, s2.p2.y))
    return lo <= hi


def segments_intersect(s1: Segment, s2: Segment) -> bool:
    """Return True if the closed segments share at least one point.

    Proper crossings, endpoint touching and collinear overlap all count.
    The bounding-box test rejects collinear but disjoint pieces, which the
    orientation test alone would accept.
    """
    if not bbox_overlap(s1, s2):
        return False
    o1 = orientation_sign(s1.p1, s1.p2, s2.p1)
    o2 = orientation_sign(s1.p1, s1.p2, s2.p2)
    o3 = orientation_sign(s2.p1, s2.p2, s1.p1)
    o4 = orientation_sign(s2.p1, s2.p2, s1.p2)
    return o1 * o2 <= 0 and o3 * o4 <= 0


# ----------------------------------------------------------------------------
# Vectorized variants (int64 arrays)
# ----------------------------------------------------------------------------

def orient_vectorized(a_pts, b_pts, c_pts):
    """Row-wise :func:`cross` for arrays of shape (M, 2).

    Any argument may also be a single point of shape (2,) and is broadcast.
    """
    a = np.asarray(a_pts, dtype=np.int64)
    b = np.asarray(b_pts, dtype=np.int64)
    c = np.asarray(c_pts, dtype=np.int64)
    return (b[..., 0] - a[..., 0]) * (c[..., 1] - a[..., 1]) - (c[..., 0] - a[..., 0]) * (b[..., 1] - a[..., 1])


def bbox_overlap_vectorized(minx1, maxx1, miny1, maxy1, minx2, maxx2, miny2, maxy2):
    """Closed bbox overlap test; inputs may be scalars or broadcastable arrays."""
    return ~((maxx1 < minx2) | (maxx2 < minx1) | (maxy1 < miny2) | (maxy2 < miny1))


def vectorized_seg_intersect(a_pts, b_pts, c_pts, d_pts):
    """Row-wise :func:`segments_intersect` for segments a[i]-b[i] and c[i]-d[i].

    All four arrays have shape (M, 2). Endpoint order inside a segment does
    not matter here. Returns a boolean array of shape (M,).
    """
    a = np.asarray(a_pts, dtype=np.int64)
    b = np.asarray(b_pts, dtype=np.int64)
    c = np.asarray(c_pts, dtype=np.int64)
    d = np.asarray(d_pts, dtype=np.int64)
    if a.size == 0:
        return np.zeros((0,), dtype=bool)
    box = bbox_overlap_vectorized(
        np.minimum(a[:, 0], b[:, 0]), np.maximum(a[:, 0], b[:, 0]),
        np.minimum(a[:, 1], b[:, 1]), np.maximum(a[:, 1], b[:, 1]),
        np.minimum(c[:, 0], d[:, 0]), np.maximum(c[:, 0], d[:, 0]),
        np.minimum(c[:, 1], d[:, 1]), np.maximum(c[:, 1], d[:, 1]),
    )
    # multiply signs, never raw determinants (the product would overflow int64)
    o1 = np.sign(orient_vectorized(a, b, c))
    o2 = np.sign(orient_vectorized(a, b, d))
    o3 = np.sign(orient_vectorized(c, d, a))
    o4 = np.sign(orient_vectorized(c, d, b))
    return box & (o1 * o2 <= 0) & (o3 * o4 <= 0)


def segments_to_array(segments: Iterable[Segment]) -> np.ndarray:
    """Pack segments into an (N, 4) int64 array of canonical x1, y1, x2, y2."""
    rows = [s.coords() for s in segments]
    if not rows:
        return np.zeros((0, 4), dtype=np.int64)
    return np.asarray(rows, dtype=np.int64)


def segments_from_array(arr) -> List[Segment]:
    """Build canonical segments from an (N, 4) array of x1, y1, x2, y2 rows."""
    a = np.asarray(arr)
    if a.size == 0:
        return []
    if a.ndim != 2 or a.shape[1] != 4:
        raise ValueError(f"Expected an (N, 4) array of segment coordinates, got shape {a.shape}")
    if not np.issubdtype(a.dtype, np.integer):
        raise ValueError(f"Segment coordinates must be integers, got dtype {a.dtype}")
    return [Segment.from_coords(*(int(v) for v in row)) for row in a]


def as_segments(items) -> List[Segment]:
    """Coerce a sequence of Segments, 4-tuples or an (N, 4) array to Segments."""
    if isinstance(items, np.ndarray):
        return segments_from_array(items)
    out: List[Segment] = []
    for item in items:
        if isinstance(item, Segment):
            out.append(item)
        elif len(item) == 2:
            out.append(Segment(item[0], item[1]))
        else:
            out.append(Segment.from_coords(*item))
    return out
