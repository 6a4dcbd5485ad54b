"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def example_notes():
    """Notes text for the standard four-monkey example."""
    from monkeysim.scenarios import EXAMPLE_NOTES
    return EXAMPLE_NOTES


@pytest.fixture
def example_simulation():
    """The standard four-monkey example as a Simulation."""
    from monkeysim.scenarios import example_simulation
    return example_simulation()


@pytest.fixture
def ping_pong():
    """Two monkeys throwing to each other: monkey 0 holds 1, 2; monkey 1 holds 3."""
    from monkeysim.scenarios import ping_pong_simulation
    return ping_pong_simulation(first_items=(1, 2), second_items=(3,))
