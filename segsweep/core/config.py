"""Configuration objects for sweep runs."""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from .constants import MAX_LEVEL, LEVEL_PROBABILITY


@dataclass
class SweepConfig:
    """Tunables for one ``find_intersection`` call.

    Attributes
    ----------
    seed : int
        Seed of the status structure's private level generator. The answer
        never depends on it, only the skip list shape does.
    max_level : int
        Upper bound on skip list tower height.
    level_probability : float
        Probability of promoting a node one level up.
    check_invariants : bool
        Validate the status order after every insertion (slow, for tests and
        debugging). A violation raises ``StatusOrderError``.
    collect_stats : bool
        Log the run statistics table at INFO when the caller did not pass its
        own ``SweepStats``.
    """
    seed: int = 0
    max_level: int = MAX_LEVEL
    level_probability: float = LEVEL_PROBABILITY
    check_invariants: bool = False
    collect_stats: bool = False

    def __post_init__(self):
        if self.max_level < 1:
            raise ValueError(f"max_level must be >= 1, got {self.max_level}")
        if not 0.0 < self.level_probability < 1.0:
            raise ValueError(f"level_probability must be in (0, 1), got {self.level_probability}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SweepConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown SweepConfig keys: {', '.join(unknown)}")
        return cls(**data)


__all__ = ['SweepConfig']
