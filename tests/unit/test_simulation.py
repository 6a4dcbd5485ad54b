"""Unit tests for WorkerSpec and Simulation."""

import pytest

from monkeysim.core.errors import StateError
from monkeysim.core.operations import (
    DivisibilityTest,
    Operand,
    Operation,
    Operator,
    RoutePreference,
)
from monkeysim.core.simulation import Simulation, WorkerSpec


def make_spec(divisor=3, if_true=0, if_false=0):
    return WorkerSpec(
        operation=Operation(Operand.old(), Operator.ADD, Operand.of(1)),
        test=DivisibilityTest(divisor),
        route=RoutePreference(if_true=if_true, if_false=if_false),
    )


class TestSimulation:
    """Tests for Simulation construction."""

    def test_creation(self):
        sim = Simulation(specs=[make_spec(), make_spec()], items=[[1, 2], []])
        assert sim.n_workers == 2
        assert sim.items == ((1, 2), ())
        assert isinstance(sim.specs, tuple)
        assert list(sim.worker_ids) == [0, 1]
        assert sim.total_items == 2

    def test_mismatched_domains(self):
        with pytest.raises(StateError):
            Simulation(specs=[make_spec()], items=[[1], [2]])

    def test_is_frozen(self):
        sim = Simulation(specs=[make_spec()], items=[[1]])
        with pytest.raises(AttributeError):
            sim.items = ((2,),)

    def test_divisors_distinct_sorted(self):
        sim = Simulation(
            specs=[make_spec(7), make_spec(3), make_spec(7)],
            items=[[], [], []],
        )
        assert sim.divisors() == [3, 7]

    def test_route_targets_not_checked_at_construction(self):
        sim = Simulation(specs=[make_spec(if_true=9, if_false=9)], items=[[1]])
        assert sim.specs[0].route.if_true == 9


class TestFromEntries:
    """Tests for Simulation.from_entries."""

    def test_sorts_by_id(self):
        a, b = make_spec(5), make_spec(7)
        sim = Simulation.from_entries([(1, b, [20]), (0, a, [10])])
        assert sim.specs == (a, b)
        assert sim.items == ((10,), (20,))

    def test_gap_rejected(self):
        with pytest.raises(StateError, match="missing"):
            Simulation.from_entries([(0, make_spec(), [1]), (2, make_spec(), [2])])

    def test_not_zero_based_rejected(self):
        with pytest.raises(StateError):
            Simulation.from_entries([(1, make_spec(), [1])])

    def test_duplicate_rejected(self):
        with pytest.raises(StateError, match="twice"):
            Simulation.from_entries([(0, make_spec(), [1]), (0, make_spec(), [2])])

    def test_empty(self):
        sim = Simulation.from_entries([])
        assert sim.n_workers == 0


class TestExampleSimulation:
    """Tests for the built-in example."""

    def test_shape(self, example_simulation):
        assert example_simulation.n_workers == 4
        assert example_simulation.items[1] == (54, 65, 75, 74)
        assert example_simulation.divisors() == [13, 17, 19, 23]
        assert example_simulation.total_items == 10
