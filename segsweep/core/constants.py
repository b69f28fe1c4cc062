"""Central limits and small sweep constants.

Coordinates are bounded so that every cross product of coordinate
differences fits in a signed 64-bit integer (the numpy paths rely on it).
"""
from __future__ import annotations

# Input limits
COORD_LIMIT: int = 10**9          # max absolute value of any input coordinate

# Event kinds; START sorts before END at equal x
START: int = 0
END: int = 1

# Skip list defaults for the status structure
MAX_LEVEL: int = 32
LEVEL_PROBABILITY: float = 0.5

__all__ = [
    'COORD_LIMIT',
    'START',
    'END',
    'MAX_LEVEL',
    'LEVEL_PROBABILITY',
]
