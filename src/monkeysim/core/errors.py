"""
Error taxonomy for the simulation core.

Every error is fatal to a run: the simulator never retries and never
returns a partial result. Errors raised while an item is being handled
carry the worker, round and item value so that a malformed set of notes
can be told apart from a genuine overflow.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for failures inside the simulation core."""

    def __init__(
        self,
        message: str,
        *,
        worker: int | None = None,
        round_index: int | None = None,
        item: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.worker = worker
        self.round_index = round_index
        self.item = item

    def located(
        self,
        *,
        worker: int | None = None,
        round_index: int | None = None,
        item: int | None = None,
    ) -> SimulationError:
        """Fill in any missing context and return the same exception."""
        if self.worker is None:
            self.worker = worker
        if self.round_index is None:
            self.round_index = round_index
        if self.item is None:
            self.item = item
        return self

    def __str__(self) -> str:
        context = []
        if self.round_index is not None:
            context.append(f"round {self.round_index}")
        if self.worker is not None:
            context.append(f"monkey {self.worker}")
        if self.item is not None:
            context.append(f"item {self.item}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class WorryOverflowError(SimulationError, OverflowError):
    """Arithmetic left the integer width configured for item values."""


class RoutingError(SimulationError):
    """An item was thrown to a worker that does not exist."""


class StateError(SimulationError):
    """Worker specs and worker queues disagree (internal consistency)."""


class InsufficientDataError(SimulationError):
    """Fewer than two workers inspected anything."""
