"""
Simulation: the validated starting point of a run.

Holds ONLY read-only inputs:
- One WorkerSpec per worker (operation, test, route)
- The initial item queue of every worker

Both are tuples indexed by WorkerId. The live queues are owned by the
Simulator, which copies them out of here; a Simulation can be run any
number of times.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

from monkeysim.core.errors import StateError
from monkeysim.core.operations import DivisibilityTest, Operation, RoutePreference


@dataclass(frozen=True)
class WorkerSpec:
    """Immutable per-worker configuration."""

    operation: Operation
    test: DivisibilityTest
    route: RoutePreference


@dataclass(frozen=True)
class Simulation:
    """Worker specs and initial queues, indexed by WorkerId."""

    specs: tuple[WorkerSpec, ...]
    items: tuple[tuple[int, ...], ...]

    def __post_init__(self):
        # Normalise to tuples so callers can pass lists
        object.__setattr__(self, "specs", tuple(self.specs))
        object.__setattr__(self, "items", tuple(tuple(int(v) for v in q) for q in self.items))
        if len(self.specs) != len(self.items):
            raise StateError(
                f"{len(self.specs)} monkey specs but {len(self.items)} item queues"
            )

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[int, WorkerSpec, Sequence[int]]],
    ) -> Simulation:
        """
        Build from (worker_id, spec, items) triples in any order.

        Worker ids must be exactly 0..n-1.

        Raises:
            StateError: on duplicate ids or gaps
        """
        by_id: dict[int, tuple[WorkerSpec, Sequence[int]]] = {}
        for worker_id, spec, items in entries:
            if worker_id in by_id:
                raise StateError(f"Monkey {worker_id} is defined twice")
            by_id[worker_id] = (spec, items)

        expected = list(range(len(by_id)))
        if sorted(by_id) != expected:
            missing = sorted(set(expected) - set(by_id))
            raise StateError(
                f"Monkey ids must be 0..{len(by_id) - 1} without gaps, missing {missing}"
            )

        return cls(
            specs=tuple(by_id[i][0] for i in expected),
            items=tuple(tuple(by_id[i][1]) for i in expected),
        )

    @property
    def n_workers(self) -> int:
        return len(self.specs)

    @property
    def worker_ids(self) -> range:
        return range(len(self.specs))

    @property
    def total_items(self) -> int:
        return sum(len(q) for q in self.items)

    def divisors(self) -> list[int]:
        """Distinct test divisors, ascending."""
        return sorted({spec.test.divisor for spec in self.specs})
