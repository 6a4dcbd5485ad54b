"""
Derived quantities over finished runs.

IMPORTANT: The simulator never reads anything computed here. One-way only.

- monkey_business: product of the two highest inspection counts
- inspections_per_round: per-round deltas from cumulative history
- inspection_shares: fraction of all inspections done by each monkey
- check_modulus_soundness: modulus relief keeps every test outcome
- check_item_conservation: items are moved and counted, never lost
"""

from __future__ import annotations
from typing import Iterable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from monkeysim.core.counter import InspectionCounter
    from monkeysim.core.simulation import Simulation
    from monkeysim.core.simulator import RunResult


def monkey_business(counter: "InspectionCounter") -> int:
    """Product of the two highest inspection counts."""
    return counter.business()


def inspections_per_round(history: np.ndarray) -> np.ndarray:
    """
    Inspections done during each round.

    Args:
        history: Cumulative counts, shape [rounds, n_workers]

    Returns:
        Per-round counts, same shape
    """
    history = np.asarray(history, dtype=np.int64)
    if history.ndim != 2:
        raise ValueError(f"history must be 2D [rounds, workers], got shape {history.shape}")
    return np.diff(history, axis=0, prepend=np.zeros((1, history.shape[1]), dtype=np.int64))


def inspection_shares(counter: "InspectionCounter") -> np.ndarray:
    """Fraction of all inspections per monkey (zeros if nothing was inspected)."""
    counts = counter.counts.astype(np.float64)
    total = counts.sum()
    if total == 0:
        return np.zeros_like(counts)
    return counts / total


def check_modulus_soundness(values: Iterable[int], divisors: Iterable[int]) -> bool:
    """
    True if reducing every value modulo the product of the divisors leaves
    every divisibility outcome unchanged.
    """
    divisors = sorted(set(divisors))
    # Python ints here: the values may be larger than any fixed width
    modulus = 1
    for d in divisors:
        modulus *= d
    return all(
        (v % modulus) % d == v % d
        for v in values
        for d in divisors
    )


def check_item_conservation(result: "RunResult", simulation: "Simulation") -> bool:
    """
    True if no item was created or lost and every taken item was counted.

    - Items held at the end equal the items held at the start
    - Total inspections equal the sum of the batch sizes taken at each turn
    - With history, the items held stay constant round after round
    """
    start = simulation.total_items
    if sum(len(q) for q in result.final_queues) != start:
        return False
    if result.counter.total != result.items_taken:
        return False
    if result.queue_sizes is not None and result.queue_sizes.size:
        if not np.all(result.queue_sizes.sum(axis=1) == start):
            return False
    return True

