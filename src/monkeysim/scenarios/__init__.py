"""
Scenario harness: pre-built simulations.

Pre-built scenarios for:
- The standard four-monkey example (10605 short, 2713310158 long)
- Ping-pong: two monkeys that always throw to each other, for checking
  turn order within a round
"""

from __future__ import annotations
from typing import Sequence

from monkeysim.core.operations import (
    DivisibilityTest,
    Operand,
    Operation,
    Operator,
    RoutePreference,
)
from monkeysim.core.simulation import Simulation, WorkerSpec
from monkeysim.loader.parser import parse_notes


EXAMPLE_NOTES = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def example_simulation() -> Simulation:
    """The standard four-monkey example."""
    return parse_notes(EXAMPLE_NOTES)


def ping_pong_simulation(
    first_items: Sequence[int] = (1, 2),
    second_items: Sequence[int] = (3,),
) -> Simulation:
    """
    Two monkeys that always throw to each other.

    Both add 0 to the item and test divisibility by 1, so monkey 0 always
    throws to 1 and monkey 1 always throws to 0, whatever the relief mode.
    """
    identity = Operation(Operand.old(), Operator.ADD, Operand.of(0))
    always = DivisibilityTest(1)
    return Simulation(
        specs=(
            WorkerSpec(identity, always, RoutePreference(if_true=1, if_false=1)),
            WorkerSpec(identity, always, RoutePreference(if_true=0, if_false=0)),
        ),
        items=(tuple(first_items), tuple(second_items)),
    )


__all__ = [
    "EXAMPLE_NOTES",
    "example_simulation",
    "ping_pong_simulation",
]
