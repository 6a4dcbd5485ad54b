"""
Core simulation primitives.

This layer knows NOTHING about the notes text format or plotting.
It only knows:
- Per-item rules (operation, divisibility test, route)
- Relief policies that keep worry levels bounded
- Worker queues and the order workers take their turns
- Counting inspections per worker

Entry points:
- run_short: 20 rounds, divide-by-3 relief
- run_long: 10000 rounds, modulus relief
"""

from monkeysim.core.errors import (
    SimulationError,
    WorryOverflowError,
    RoutingError,
    StateError,
    InsufficientDataError,
)
from monkeysim.core.operations import (
    IntegerBounds,
    Operand,
    OperandKind,
    Operator,
    Operation,
    DivisibilityTest,
    RoutePreference,
    apply_operation,
    checked_add,
    checked_mul,
)
from monkeysim.core.relief import ReliefMode, ReliefPolicy, compute_modulus
from monkeysim.core.counter import InspectionCounter
from monkeysim.core.simulation import WorkerSpec, Simulation
from monkeysim.core.simulator import (
    SimulatorConfig,
    Simulator,
    RunResult,
    SHORT_RUN,
    LONG_RUN,
    run,
    run_config,
    run_short,
    run_long,
)

__all__ = [
    "SimulationError",
    "WorryOverflowError",
    "RoutingError",
    "StateError",
    "InsufficientDataError",
    "IntegerBounds",
    "Operand",
    "OperandKind",
    "Operator",
    "Operation",
    "DivisibilityTest",
    "RoutePreference",
    "apply_operation",
    "checked_add",
    "checked_mul",
    "ReliefMode",
    "ReliefPolicy",
    "compute_modulus",
    "InspectionCounter",
    "WorkerSpec",
    "Simulation",
    "SimulatorConfig",
    "Simulator",
    "RunResult",
    "SHORT_RUN",
    "LONG_RUN",
    "run",
    "run_config",
    "run_short",
    "run_long",
]
