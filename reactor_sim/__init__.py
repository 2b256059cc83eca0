"""
Reactor Control Room Simulator

A real-time physics simulation of a single nuclear reactor, served over HTTP.

This library provides:
- Reactor model with operator commands, per-tick physics and snapshots
- Grid load generator (random walk with decaying demand spikes)
- Proportional auto controller and alarm status evaluation
- FastAPI server with a fixed-cadence tick loop and SSE state stream

Example:
    >>> from reactor_sim import Reactor
    >>> reactor = Reactor(seed=1)
    >>> reactor.advance(0.2)
    >>> reactor.snapshot().temperature
"""

__version__ = "1.0.0"

from reactor_sim.commands import ActionType, apply_action
from reactor_sim.constants import DEFAULT_CONSTANTS, SimulationConstants
from reactor_sim.control import AutoControlConfig, AutoController
from reactor_sim.exceptions import ConfigError, ReactorSimError, UnknownActionError
from reactor_sim.grid import GridLoadConfig, GridLoadGenerator
from reactor_sim.reactor import Reactor
from reactor_sim.safety import StatusEvaluator
from reactor_sim.state import (
    FuelRod,
    ReactorSnapshot,
    ReactorState,
    ReactorStatus,
    create_balanced_state,
)

__all__ = [
    'ActionType',
    'apply_action',
    'AutoControlConfig',
    'AutoController',
    'ConfigError',
    'DEFAULT_CONSTANTS',
    'FuelRod',
    'GridLoadConfig',
    'GridLoadGenerator',
    'Reactor',
    'ReactorSimError',
    'ReactorSnapshot',
    'ReactorState',
    'ReactorStatus',
    'SimulationConstants',
    'StatusEvaluator',
    'UnknownActionError',
    'create_balanced_state',
]
