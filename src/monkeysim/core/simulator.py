"""
Simulator: runs the rounds.

Each round, every worker in ascending WorkerId order:
1. Takes its whole queue, leaving an empty one behind
2. For each taken item (FIFO): count it, transform it, relieve it,
   test it, and append it to the target worker's live queue

Because pushes land in the live queues, an item thrown to a higher id is
handled later in the SAME round, while an item thrown to a lower id waits
for the NEXT round. Worker turns must stay serialized for this reason.

A worker that throws to itself appends to its fresh queue; the taken
batch is never touched again.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from monkeysim.core.counter import InspectionCounter
from monkeysim.core.errors import RoutingError, SimulationError, StateError
from monkeysim.core.operations import IntegerBounds
from monkeysim.core.relief import ReliefMode, ReliefPolicy
from monkeysim.core.simulation import Simulation, WorkerSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulatorConfig:
    """Immutable configuration for a simulation run."""

    rounds: int = 20
    relief: ReliefMode = ReliefMode.DIVIDE
    item_dtype: str = "int64"  # Integer width item values must fit in
    record_history: bool = True  # Keep per-round counts and queue sizes

    def __post_init__(self):
        if self.rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {self.rounds}")
        object.__setattr__(self, "relief", ReliefMode(self.relief))
        # Fail early on a bad dtype
        IntegerBounds.for_dtype(self.item_dtype)

    @property
    def bounds(self) -> IntegerBounds:
        return IntegerBounds.for_dtype(self.item_dtype)


SHORT_RUN = SimulatorConfig(rounds=20, relief=ReliefMode.DIVIDE)
LONG_RUN = SimulatorConfig(rounds=10000, relief=ReliefMode.MODULUS)


@dataclass
class RunResult:
    """Everything a finished run produced."""

    counter: InspectionCounter
    rounds: int
    relief: ReliefPolicy
    items_taken: int  # Sum of batch sizes taken at every turn
    final_queues: list[list[int]]
    history: np.ndarray | None = None  # [rounds, n_workers] cumulative counts
    queue_sizes: np.ndarray | None = None  # [rounds, n_workers] at end of round

    @property
    def business(self) -> int:
        return self.counter.business()


@dataclass
class Simulator:
    """
    Owns the live worker queues and the inspection counter for one run.

    The relief policy (and its modulus) is built once here unless one is
    passed in explicitly. A passed-in policy must match config.relief, and
    its modulus must be a multiple of every divisor in the simulation.
    """

    simulation: Simulation
    config: SimulatorConfig = field(default_factory=SimulatorConfig)
    relief_policy: ReliefPolicy | None = None

    current_round: int = field(default=0, init=False)
    items_taken: int = field(default=0, init=False)
    counter: InspectionCounter = field(default=None, init=False)
    _queues: list[list[int]] = field(default=None, init=False)
    _bounds: IntegerBounds = field(default=None, init=False)
    _history: list[np.ndarray] = field(default=None, init=False)
    _queue_sizes: list[np.ndarray] = field(default=None, init=False)

    def __post_init__(self):
        self._bounds = self.config.bounds
        if self.relief_policy is None:
            self.relief_policy = ReliefPolicy.for_simulation(
                self.config.relief, self.simulation, self._bounds
            )
        else:
            if self.relief_policy.mode != self.config.relief:
                raise ValueError(
                    f"Relief policy {self.relief_policy} contradicts configured "
                    f"relief mode {self.config.relief.value!r}"
                )
            self.relief_policy.check_divisors(self.simulation.divisors())
        self._queues = [list(items) for items in self.simulation.items]
        self.counter = InspectionCounter(self.simulation.n_workers)
        self._history = []
        self._queue_sizes = []

    @property
    def queues(self) -> list[list[int]]:
        """Copy of the live queues."""
        return [list(q) for q in self._queues]

    def run(self, n_rounds: int | None = None) -> RunResult:
        """Run n_rounds (config.rounds by default) and return the result."""
        if n_rounds is None:
            n_rounds = self.config.rounds
        if n_rounds < 0:
            raise ValueError(f"n_rounds must be non-negative, got {n_rounds}")

        logger.info(
            "Running %d rounds over %d monkeys (%d items), relief: %s",
            n_rounds,
            self.simulation.n_workers,
            self.simulation.total_items,
            self.relief_policy,
        )
        for _ in range(n_rounds):
            self.step_round()
        logger.info("Finished at round %d, counts %s", self.current_round, self.counter.as_dict())

        return RunResult(
            counter=self.counter,
            rounds=self.current_round,
            relief=self.relief_policy,
            items_taken=self.items_taken,
            final_queues=self.queues,
            history=self._stack(self._history) if self.config.record_history else None,
            queue_sizes=self._stack(self._queue_sizes) if self.config.record_history else None,
        )

    def _stack(self, rows: list[np.ndarray]) -> np.ndarray:
        if not rows:
            return np.zeros((0, len(self._queues)), dtype=np.int64)
        return np.array(rows, dtype=np.int64)

    def step_round(self) -> None:
        """Run one round: every worker takes one turn, in ascending id order."""
        self.current_round += 1
        for worker_id in self.simulation.worker_ids:
            self._take_turn(worker_id)

        if self.config.record_history:
            self._history.append(self.counter.counts)
            self._queue_sizes.append(np.array([len(q) for q in self._queues], dtype=np.int64))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Round %d counts %s", self.current_round, self.counter.as_dict())

    def _take_turn(self, worker_id: int) -> None:
        if worker_id >= len(self._queues):
            raise StateError(
                "No queue for monkey", worker=worker_id, round_index=self.current_round
            )
        spec = self.simulation.specs[worker_id]

        batch = self._queues[worker_id]
        self._queues[worker_id] = []
        self.items_taken += len(batch)

        for item in batch:
            try:
                self._inspect(worker_id, spec, item)
            except SimulationError as exc:
                raise exc.located(
                    worker=worker_id, round_index=self.current_round, item=item
                )

    def _inspect(self, worker_id: int, spec: WorkerSpec, item: int) -> None:
        self.counter.record(worker_id)
        value = spec.operation.apply(item, self._bounds)
        value = self.relief_policy.apply(value)
        target = spec.route.select(spec.test.apply(value))
        if not 0 <= target < len(self._queues):
            raise RoutingError(f"Cannot throw to unknown monkey {target}")
        self._queues[target].append(value)


def run(
    simulation: Simulation,
    rounds: int,
    relief_policy: ReliefPolicy,
    item_dtype: str = "int64",
) -> InspectionCounter:
    """Run a simulation with an explicit relief policy and return the counts."""
    config = SimulatorConfig(
        rounds=rounds,
        relief=relief_policy.mode,
        item_dtype=item_dtype,
        record_history=False,
    )
    simulator = Simulator(simulation, config=config, relief_policy=relief_policy)
    return simulator.run().counter


def run_config(simulation: Simulation, config: SimulatorConfig) -> RunResult:
    """Run a simulation with the relief policy derived from config."""
    return Simulator(simulation, config=config).run()


def run_short(simulation: Simulation) -> int:
    """20 rounds with divide relief; product of the two highest counts."""
    return run_config(simulation, SHORT_RUN).business


def run_long(simulation: Simulation) -> int:
    """10000 rounds with modulus relief; product of the two highest counts."""
    return run_config(simulation, LONG_RUN).business
