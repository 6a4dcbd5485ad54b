"""
InspectionCounter: how many items each worker has handled.

Counts live in a dense int64 array indexed by WorkerId, the same way the
engine keeps per-node update statistics.
"""

from __future__ import annotations

import numpy as np

from monkeysim.core.errors import InsufficientDataError, StateError


class InspectionCounter:
    """
    Monotonic per-worker inspection tally.

    Tie-break for top(): equal counts are ordered by ascending WorkerId,
    so the lower id wins.
    """

    def __init__(self, n_workers: int):
        if n_workers < 0:
            raise ValueError(f"n_workers must be non-negative, got {n_workers}")
        self._counts = np.zeros(n_workers, dtype=np.int64)

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, worker_id: int) -> int:
        return int(self._counts[worker_id])

    def record(self, worker_id: int, n: int = 1) -> None:
        """Count n inspections for a worker."""
        if not 0 <= worker_id < len(self._counts):
            raise StateError(f"No counter slot for monkey {worker_id}")
        if n < 0:
            raise ValueError("Inspection counts only increase")
        self._counts[worker_id] += n

    @property
    def counts(self) -> np.ndarray:
        """Copy of the count array."""
        return self._counts.copy()

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    def as_dict(self) -> dict[int, int]:
        return {i: int(c) for i, c in enumerate(self._counts)}

    def top(self, k: int = 2) -> list[tuple[int, int]]:
        """
        The k busiest workers as (worker_id, count), busiest first.

        Raises:
            InsufficientDataError: if fewer than two workers inspected anything
        """
        active = int(np.count_nonzero(self._counts))
        if active < 2:
            raise InsufficientDataError(
                f"Need at least two active monkeys, found {active}"
            )
        # stable sort keeps ascending ids among equal counts
        order = np.argsort(-self._counts, kind="stable")[:k]
        return [(int(i), int(self._counts[i])) for i in order]

    def business(self) -> int:
        """Product of the two highest counts."""
        (_, first), (_, second) = self.top(2)
        return first * second

    def __repr__(self) -> str:
        return f"InspectionCounter({self.as_dict()})"
