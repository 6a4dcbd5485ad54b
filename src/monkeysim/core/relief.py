"""
Relief policy: keeps item values bounded after each transform.

Two modes, chosen once per run:
- DIVIDE: value / 3, truncated toward zero. Values still grow, so the
  transform's overflow check is what protects long runs.
- MODULUS: value mod M, where M is the product of every distinct divisor
  in the simulation.

Why MODULUS is sound: transforms only add and multiply, and
(a mod M) op (b mod M) ≡ (a op b) mod M. Every test divisor d_i divides M,
so x mod d_i == (x mod M) mod d_i. Reducing after every transform therefore
never changes a later divisibility outcome, and the run can go on for any
number of rounds with values below M.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TYPE_CHECKING

from monkeysim.core.operations import INT64, IntegerBounds, checked_mul

if TYPE_CHECKING:
    from monkeysim.core.simulation import Simulation


RELIEF_DIVISOR = 3


class ReliefMode(str, Enum):
    """How worry is relieved after each inspection."""

    DIVIDE = "divide"
    MODULUS = "modulus"


def _truncated_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def compute_modulus(divisors: Iterable[int], bounds: IntegerBounds = INT64) -> int:
    """
    Product of the distinct divisors.

    Raises:
        WorryOverflowError: if the product leaves bounds. This is the only
            place a set of notes with too many or too large divisors is
            rejected, and it happens before the first round.
    """
    modulus = 1
    for d in sorted(set(divisors)):
        if d <= 0:
            raise ValueError(f"Divisor must be positive, got {d}")
        modulus = checked_mul(modulus, d, bounds)
    return modulus


@dataclass(frozen=True)
class ReliefPolicy:
    """A relief mode plus the constant it needs."""

    mode: ReliefMode
    modulus: int | None = None
    divisor: int = RELIEF_DIVISOR

    def __post_init__(self):
        if self.mode is ReliefMode.MODULUS:
            if self.modulus is None or self.modulus <= 0:
                raise ValueError("MODULUS relief requires a positive modulus")
        if self.divisor <= 0:
            raise ValueError(f"Relief divisor must be positive, got {self.divisor}")

    @classmethod
    def divide(cls) -> ReliefPolicy:
        return cls(mode=ReliefMode.DIVIDE)

    @classmethod
    def with_modulus(cls, modulus: int) -> ReliefPolicy:
        return cls(mode=ReliefMode.MODULUS, modulus=modulus)

    @classmethod
    def for_simulation(
        cls,
        mode: ReliefMode | str,
        simulation: "Simulation",
        bounds: IntegerBounds = INT64,
    ) -> ReliefPolicy:
        """Build the policy for a run, computing M once if it is needed."""
        mode = ReliefMode(mode)
        if mode is ReliefMode.DIVIDE:
            return cls.divide()
        return cls.with_modulus(compute_modulus(simulation.divisors(), bounds))

    def check_divisors(self, divisors: Iterable[int]) -> None:
        """
        Reject a modulus that would change some divisibility outcome.

        Raises:
            ValueError: if M is not a multiple of every divisor
        """
        if self.mode is not ReliefMode.MODULUS:
            return
        uncovered = sorted({d for d in divisors if self.modulus % d != 0})
        if uncovered:
            raise ValueError(
                f"Modulus {self.modulus} is not a multiple of divisors {uncovered}"
            )

    def apply(self, value: int) -> int:
        if self.mode is ReliefMode.DIVIDE:
            return _truncated_div(value, self.divisor)
        return _truncated_mod(value, self.modulus)

    def __str__(self) -> str:
        if self.mode is ReliefMode.DIVIDE:
            return f"divide by {self.divisor}"
        return f"modulus {self.modulus}"
