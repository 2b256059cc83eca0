"""
Shared fixtures for the reactor simulator tests.
"""

import pytest

from reactor_sim import GridLoadConfig, GridLoadGenerator, Reactor, create_balanced_state


def _flat_grid(load: float = 1000.0) -> GridLoadGenerator:
    """Grid generator that always returns the same load (no drift, no spikes)"""
    config = GridLoadConfig(
        initial_base_load=load,
        min_base_load=load,
        max_base_load=load,
        walk_step=0.0,
        spike_magnitude=0.0,
    )
    return GridLoadGenerator(config, seed=0)


@pytest.fixture
def reactor():
    """Reactor in the default balanced state with a seeded grid"""
    return Reactor(seed=1234)


@pytest.fixture
def manual_reactor():
    """Reactor with auto control disabled and a constant 1000 kW load"""
    state = create_balanced_state()
    state.is_auto_control = False
    return Reactor(state=state, grid=_flat_grid())


@pytest.fixture
def make_reactor():
    """Factory for reactors built from a balanced state with overrides"""

    def _create(grid=None, **overrides):
        state = create_balanced_state()
        for name, value in overrides.items():
            setattr(state, name, value)
        return Reactor(state=state, grid=grid or _flat_grid())

    return _create


@pytest.fixture
def flat_grid():
    """Factory for constant-load grid generators"""
    return _flat_grid
