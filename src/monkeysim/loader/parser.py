"""
Parse monkey notes into a Simulation.

Notes are one block per monkey, blocks separated by a single blank line:

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Lines after the header are indented; whitespace around ':', ',' and the
operator is optional. Trailing whitespace at the end of the text is ignored.
"""

from __future__ import annotations
from pathlib import Path
import logging
import re

from monkeysim.loader.errors import ParseError
from monkeysim.core.operations import (
    DivisibilityTest,
    Operand,
    Operation,
    Operator,
    RoutePreference,
)
from monkeysim.core.simulation import Simulation, WorkerSpec

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"Monkey (\d+)\s*:\s*")
_ITEMS = re.compile(r"\s+Starting items\s*:\s*(\d+(?:\s*,\s*\d+)*)\s*")
_OPERATION = re.compile(
    r"\s+Operation\s*:\s*new\s*=\s*(old|\d+)\s*([+*])\s*(old|\d+)\s*"
)
_TEST = re.compile(r"\s+Test\s*:\s*divisible by\s+(\d+)\s*")
_IF_TRUE = re.compile(r"\s+If true\s*:\s*throw to monkey\s+(\d+)\s*")
_IF_FALSE = re.compile(r"\s+If false\s*:\s*throw to monkey\s+(\d+)\s*")


def _parse_operand(token: str) -> Operand:
    return Operand.old() if token == "old" else Operand.of(int(token))


class _Lines:
    """Cursor over the notes lines with 1-based line numbers for errors."""

    def __init__(self, text: str):
        self.lines = text.rstrip().splitlines()
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.lines)

    def expect(self, pattern: re.Pattern, what: str) -> re.Match:
        line_no = self.index + 1
        if self.exhausted:
            raise ParseError(f"expected {what}, found end of input", line=line_no)
        line = self.lines[self.index]
        match = pattern.fullmatch(line)
        if match is None:
            raise ParseError(f"expected {what}, found {line!r}", line=line_no)
        self.index += 1
        return match

    def expect_blank(self) -> None:
        line_no = self.index + 1
        line = self.lines[self.index]
        if line.strip():
            raise ParseError(f"expected blank line between monkeys, found {line!r}", line=line_no)
        self.index += 1


def _parse_block(lines: _Lines) -> tuple[int, WorkerSpec, list[int]]:
    worker_id = int(lines.expect(_HEADER, "'Monkey <id>:' header").group(1))

    items_text = lines.expect(_ITEMS, "'Starting items: <int>, ...' line").group(1)
    items = [int(token) for token in re.split(r"\s*,\s*", items_text)]

    op = lines.expect(_OPERATION, "'Operation: new = old <+|*> <old|int>' line")
    operation = Operation(
        first=_parse_operand(op.group(1)),
        operator=Operator(op.group(2)),
        second=_parse_operand(op.group(3)),
    )

    test_line = lines.index + 1
    divisor = int(lines.expect(_TEST, "'Test: divisible by <int>' line").group(1))
    if divisor <= 0:
        raise ParseError(f"divisor must be positive, got {divisor}", line=test_line)

    if_true = int(lines.expect(_IF_TRUE, "'If true: throw to monkey <id>' line").group(1))
    if_false = int(lines.expect(_IF_FALSE, "'If false: throw to monkey <id>' line").group(1))

    spec = WorkerSpec(
        operation=operation,
        test=DivisibilityTest(divisor),
        route=RoutePreference(if_true=if_true, if_false=if_false),
    )
    return worker_id, spec, items


def parse_notes(text: str) -> Simulation:
    """
    Parse notes text into a Simulation.

    Raises:
        ParseError: if the text does not follow the grammar
        StateError: if monkey ids are duplicated or not 0..n-1
    """
    lines = _Lines(text)
    if lines.exhausted:
        raise ParseError("no monkeys found", line=1)

    entries = [_parse_block(lines)]
    while not lines.exhausted:
        lines.expect_blank()
        entries.append(_parse_block(lines))

    simulation = Simulation.from_entries(entries)
    logger.debug("Parsed %d monkeys holding %d items", simulation.n_workers, simulation.total_items)
    return simulation


def load_notes(path: str | Path) -> Simulation:
    """Read and parse a notes file."""
    return parse_notes(Path(path).read_text())
