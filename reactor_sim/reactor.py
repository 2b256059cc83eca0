"""
Reactor Model

This module implements the simulated reactor: the operator commands, the
per-tick physics update and the snapshot handed to observers. All state
access is serialized through a single reader-writer lock so one tick loop and
any number of request handlers can share the instance.
"""

import logging
import math
from typing import Optional

import numpy as np

from .constants import DEFAULT_CONSTANTS, SimulationConstants
from .control import AutoController
from .grid import GridLoadGenerator
from .rwlock import ReadWriteLock
from .safety import StatusEvaluator
from .state import (
    FuelRod,
    ReactorSnapshot,
    ReactorState,
    ReactorStatus,
    create_balanced_state,
)

logger = logging.getLogger(__name__)


class Reactor:
    """
    Single reactor with turbine, fuel rod and grid connection

    Commands take the exclusive lock, snapshot() takes the shared lock. None
    of the operations raise once the model is constructed: out-of-range
    setpoints are clamped and disallowed commands are ignored.
    """

    def __init__(
        self,
        constants: SimulationConstants = DEFAULT_CONSTANTS,
        state: Optional[ReactorState] = None,
        grid: Optional[GridLoadGenerator] = None,
        controller: Optional[AutoController] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize reactor

        Args:
            constants: Simulation constants
            state: Initial state (balanced at the optimal temperature if None)
            grid: Grid load generator (seeded with `seed` if None)
            controller: Auto controller
            seed: Random seed for the default grid load generator
        """
        self._constants = constants
        self._lock = ReadWriteLock()

        self.grid = grid or GridLoadGenerator(seed=seed)
        self.controller = controller or AutoController(constants=constants)
        self.status_evaluator = StatusEvaluator(constants)

        if state is None:
            state = create_balanced_state(self.grid.base_load, constants)
        self._state = state

    @property
    def constants(self) -> SimulationConstants:
        return self._constants

    # ------------------------------------------------------------------
    # Operator commands
    # ------------------------------------------------------------------

    def power_on(self) -> None:
        with self._lock.write_locked():
            if self._state.is_powered_on:
                return
            self._state.is_powered_on = True
            self._state.status &= ~ReactorStatus.SCRAM
        logger.info("Reactor powered on")

    def power_off(self) -> None:
        with self._lock.write_locked():
            self._state.is_powered_on = False
        logger.info("Reactor powered off")

    def scram(self) -> None:
        with self._lock.write_locked():
            already = ReactorStatus.SCRAM in self._state.status
            self._state.status |= ReactorStatus.SCRAM
            self._state.is_powered_on = False
        if not already:
            logger.warning("SCRAM: emergency shutdown")

    def toggle_auto(self) -> None:
        with self._lock.write_locked():
            self._state.is_auto_control = not self._state.is_auto_control
            enabled = self._state.is_auto_control
        logger.info(f"Auto control {'enabled' if enabled else 'disabled'}")

    def set_fission_rate(self, value: float) -> None:
        """Set fission rate (%), ignored while auto control is active"""
        if not self._is_finite(value, "fission rate"):
            return
        with self._lock.write_locked():
            if self._state.is_auto_control:
                logger.debug("Fission rate setpoint ignored, auto control active")
                return
            self._state.fission_rate = float(np.clip(value, 0.0, 100.0))

    def set_turbine_output(self, value: float) -> None:
        """Set turbine output (%), ignored while auto control is active"""
        if not self._is_finite(value, "turbine output"):
            return
        with self._lock.write_locked():
            if self._state.is_auto_control:
                logger.debug("Turbine output setpoint ignored, auto control active")
                return
            self._state.turbine_output = float(np.clip(value, 0.0, 100.0))

    def set_power_load(self, value: float) -> None:
        """Override the grid demand (kW) until the next tick recomputes it"""
        if not self._is_finite(value, "power load"):
            return
        with self._lock.write_locked():
            self._state.power_load = max(0.0, float(value))

    def refuel(self) -> None:
        with self._lock.write_locked():
            self._state.fuel_rod = FuelRod(condition=100.0)
        logger.info("Fuel rod replaced")

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def advance(self, dt: float) -> None:
        """
        Advance the simulation by one tick

        Args:
            dt: Simulated seconds per tick (negative values are treated as 0)
        """
        dt = max(0.0, dt)
        with self._lock.write_locked():
            state = self._state
            state.power_load = self.grid.update(dt)

            if not state.is_powered_on or ReactorStatus.SCRAM in state.status:
                self._advance_shutdown(state, dt)
            else:
                self._advance_running(state, dt)

            self.status_evaluator.update_status(state)

    def snapshot(self) -> ReactorSnapshot:
        with self._lock.read_locked():
            return ReactorSnapshot.of(self._state)

    def _advance_shutdown(self, state: ReactorState, dt: float) -> None:
        # Rods fully inserted, core coasts down with doubled ambient losses
        state.fission_rate = 0.0
        self._update_turbine(state)

        c = self._constants
        heat_consumed_by_turbine = state.power_output / c.turbine_power_factor
        ambient_cooling = state.temperature * c.ambient_temp_dissipation * 2
        state.temperature -= (heat_consumed_by_turbine + ambient_cooling) * dt

        if state.temperature <= 0:
            state.temperature = 0.0
            state.power_output = 0.0

    def _advance_running(self, state: ReactorState, dt: float) -> None:
        c = self._constants

        if state.is_auto_control:
            self.controller.adjust(state)

        rod = state.fuel_rod
        if rod is not None and rod.condition > 0:
            fission_fraction = state.fission_rate / 100.0
            state.temperature += fission_fraction * c.heat_generation_rate * dt
            fuel_consumed = fission_fraction * c.fuel_consumption_rate * dt
            state.fuel_rod = FuelRod(condition=max(0.0, rod.condition - fuel_consumed))

        self._update_turbine(state)

        heat_consumed_by_turbine = state.power_output / c.turbine_power_factor
        ambient_cooling = state.temperature * c.ambient_temp_dissipation
        state.temperature -= (heat_consumed_by_turbine + ambient_cooling) * dt

        if state.temperature < 0:
            state.temperature = 0.0

    def _update_turbine(self, state: ReactorState) -> None:
        c = self._constants
        temp_efficiency = min(1.0, state.temperature / c.overheat_temp)
        potential_power = state.temperature * (state.turbine_output / 100.0) * temp_efficiency
        state.power_output = min(c.max_power_output, potential_power * c.turbine_power_factor)

    @staticmethod
    def _is_finite(value: float, name: str) -> bool:
        if math.isfinite(value):
            return True
        logger.debug(f"Ignoring non-finite {name} setpoint: {value}")
        return False
