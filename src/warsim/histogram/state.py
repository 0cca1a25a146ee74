"""Histogram of game lengths across many simulated games."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


class TurnHistogram:
    """Maps a game's final turn count to how many games ended there."""

    def __init__(self, counts: Optional[Mapping[int, int]] = None) -> None:
        self._counts: Counter = Counter()
        if counts:
            for length, count in counts.items():
                self.add(length, count)

    def add(self, length: int, count: int = 1) -> None:
        """Record ``count`` more games lasting ``length`` turns."""
        if length < 0:
            raise ValueError(f"Game length must be non-negative, got {length}")
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")
        if count:
            self._counts[length] += count

    def merge(self, other: "TurnHistogram") -> "TurnHistogram":
        """Add another histogram's counts into this one (in place)."""
        self._counts.update(other._counts)
        return self

    def __getitem__(self, length: int) -> int:
        return self._counts.get(length, 0)

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TurnHistogram):
            return NotImplemented
        return dict(self._counts) == dict(other._counts)

    def __repr__(self) -> str:
        return f"TurnHistogram(games={self.total_games()}, lengths={len(self)})"

    def items(self) -> List[Tuple[int, int]]:
        """(length, count) pairs sorted by length."""
        return sorted(self._counts.items())

    def total_games(self) -> int:
        return sum(self._counts.values())

    def to_dict(self) -> Dict[int, int]:
        return dict(self.items())
