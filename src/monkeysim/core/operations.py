"""
Per-item rules: the value transform, the divisibility test and the route.

Operands and operators are closed sets, so they are small value types
rather than an open class hierarchy. All arithmetic on item values goes
through checked_add / checked_mul, which reject results outside the
integer width chosen for the run.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from monkeysim.core.errors import WorryOverflowError


@dataclass(frozen=True)
class IntegerBounds:
    """Inclusive range of a signed integer width."""

    min: int
    max: int

    @classmethod
    def for_dtype(cls, dtype: str | np.dtype = "int64") -> IntegerBounds:
        """Bounds of a signed numpy integer dtype, e.g. "int64" or "int32"."""
        dt = np.dtype(dtype)
        if dt.kind != "i":
            raise ValueError(f"Item dtype must be a signed integer, got {dt}")
        info = np.iinfo(dt)
        return cls(min=int(info.min), max=int(info.max))

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


INT64 = IntegerBounds.for_dtype("int64")


def _checked(value: int, bounds: IntegerBounds, expression: str) -> int:
    if not bounds.contains(value):
        raise WorryOverflowError(
            f"{expression} overflows the range [{bounds.min}, {bounds.max}]"
        )
    return value


def checked_add(a: int, b: int, bounds: IntegerBounds = INT64) -> int:
    return _checked(a + b, bounds, f"{a} + {b}")


def checked_mul(a: int, b: int, bounds: IntegerBounds = INT64) -> int:
    return _checked(a * b, bounds, f"{a} * {b}")


class OperandKind(str, Enum):
    """Which side of an operation an operand reads."""

    OLD = "old"
    LITERAL = "literal"


@dataclass(frozen=True)
class Operand:
    """Either the current item value ("old") or a literal integer."""

    kind: OperandKind
    value: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "kind", OperandKind(self.kind))
        if self.kind is OperandKind.OLD and self.value is not None:
            raise ValueError(f"An old operand carries no value, got {self.value}")
        if self.kind is OperandKind.LITERAL:
            if self.value is None:
                raise ValueError("A literal operand needs a value")
            object.__setattr__(self, "value", int(self.value))

    @classmethod
    def old(cls) -> Operand:
        return cls(OperandKind.OLD)

    @classmethod
    def of(cls, value: int) -> Operand:
        return cls(OperandKind.LITERAL, value)

    @property
    def is_old(self) -> bool:
        return self.kind is OperandKind.OLD

    def resolve(self, old: int) -> int:
        """Substitute the current item value if this operand refers to it."""
        if self.kind is OperandKind.OLD:
            return old
        return self.value

    def __str__(self) -> str:
        return "old" if self.kind is OperandKind.OLD else str(self.value)


class Operator(str, Enum):
    """Arithmetic operators allowed in an operation."""

    ADD = "+"
    MULTIPLY = "*"

    def apply(self, a: int, b: int, bounds: IntegerBounds = INT64) -> int:
        if self is Operator.ADD:
            return checked_add(a, b, bounds)
        return checked_mul(a, b, bounds)


@dataclass(frozen=True)
class Operation:
    """new = <first> <operator> <second>"""

    first: Operand
    operator: Operator
    second: Operand

    def apply(self, old: int, bounds: IntegerBounds = INT64) -> int:
        """
        Compute the new item value.

        Raises:
            WorryOverflowError: if the result does not fit in bounds
        """
        a = self.first.resolve(old)
        b = self.second.resolve(old)
        return self.operator.apply(a, b, bounds)

    def __str__(self) -> str:
        return f"{self.first} {self.operator.value} {self.second}"


def apply_operation(operation: Operation, old: int, bounds: IntegerBounds = INT64) -> int:
    """Convenience function for Operation.apply."""
    return operation.apply(old, bounds)


@dataclass(frozen=True)
class DivisibilityTest:
    """True iff the item value is a multiple of divisor."""

    divisor: int

    def __post_init__(self):
        if self.divisor <= 0:
            raise ValueError(f"Divisor must be positive, got {self.divisor}")

    def apply(self, value: int) -> bool:
        return value % self.divisor == 0


@dataclass(frozen=True)
class RoutePreference:
    """Where an item goes depending on the divisibility test outcome."""

    if_true: int
    if_false: int

    def select(self, outcome: bool) -> int:
        return self.if_true if outcome else self.if_false
