"""
Auto Control

Proportional feedback controller that drives turbine output towards the grid
demand and fission rate towards the optimal core temperature.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .constants import DEFAULT_CONSTANTS, SimulationConstants
from .state import ReactorState


@dataclass
class AutoControlConfig:
    """Controller gains"""
    turbine_gain: float = 0.01      # % turbine per kW of power error
    fission_gain: float = 0.002     # % fission per °C of temperature error


class AutoController:
    """
    Single-gain proportional controller

    There is no integral or derivative term; the controller is allowed to
    oscillate or saturate.
    """

    def __init__(
        self,
        config: Optional[AutoControlConfig] = None,
        constants: SimulationConstants = DEFAULT_CONSTANTS,
    ):
        self.config = config or AutoControlConfig()
        self.constants = constants

    def adjust(self, state: ReactorState) -> None:
        """
        Adjust turbine output and fission rate setpoints in place

        Args:
            state: Reactor state, must be held under the model's write lock
        """
        power_error = state.power_load - state.power_output
        temp_error = self.constants.optimal_temp - state.temperature

        state.turbine_output = float(
            np.clip(state.turbine_output + power_error * self.config.turbine_gain, 0.0, 100.0)
        )
        state.fission_rate = float(
            np.clip(state.fission_rate + temp_error * self.config.fission_gain, 0.0, 100.0)
        )
