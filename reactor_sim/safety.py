"""
Status Evaluator

This module derives the reactor alarm bitset from the current physical state.
Every flag except SCRAM is recomputed from scratch on each tick; SCRAM is
carried over until a power-on command clears it.
"""

import logging
from dataclasses import dataclass
from typing import List

from .constants import DEFAULT_CONSTANTS, SimulationConstants
from .state import ReactorState, ReactorStatus

logger = logging.getLogger(__name__)


# Output alarms trigger when output deviates from load by more than this fraction
OUTPUT_DEVIATION_FRACTION = 0.2
# Output alarms are suppressed below this load (kW) to avoid noise near zero
OUTPUT_ALARM_MIN_LOAD = 100.0


@dataclass(frozen=True)
class StatusChange:
    """Flags raised and cleared by one status evaluation"""
    previous: ReactorStatus
    current: ReactorStatus

    @property
    def raised(self) -> ReactorStatus:
        return self.current & ~self.previous

    @property
    def cleared(self) -> ReactorStatus:
        return self.previous & ~self.current

    def __bool__(self) -> bool:
        return self.previous != self.current


class StatusEvaluator:
    """
    Reactor alarm evaluation
    """

    def __init__(self, constants: SimulationConstants = DEFAULT_CONSTANTS):
        self.constants = constants

    def evaluate(self, state: ReactorState) -> ReactorStatus:
        """
        Compute the status flags for a state without modifying it

        Args:
            state: Current reactor state

        Returns:
            Status bitset, SCRAM carried over from state.status
        """
        c = self.constants
        status = state.status & ReactorStatus.SCRAM

        # Only the most severe heat flag is ever set
        if state.temperature >= c.meltdown_temp:
            status |= ReactorStatus.MELTDOWN
        elif state.temperature >= c.overheat_temp:
            status |= ReactorStatus.OVERHEAT
        elif state.temperature < c.low_temp and state.is_powered_on and state.power_output > 0:
            status |= ReactorStatus.TEMP_LOW

        if state.power_load > OUTPUT_ALARM_MIN_LOAD:
            threshold = state.power_load * OUTPUT_DEVIATION_FRACTION
            power_difference = state.power_output - state.power_load
            if power_difference > threshold:
                status |= ReactorStatus.OUTPUT_HIGH
            elif power_difference < -threshold:
                status |= ReactorStatus.OUTPUT_LOW

        if state.fuel_rod is None or state.fuel_rod.condition <= 0:
            status |= ReactorStatus.FUEL_OUT
        elif state.fuel_rod.condition < c.low_fuel_threshold:
            status |= ReactorStatus.FUEL_LOW

        return ReactorStatus(status)

    def update_status(self, state: ReactorState) -> StatusChange:
        """
        Recompute state.status in place and discard a spent fuel rod

        Args:
            state: Current reactor state, held under the model's write lock

        Returns:
            StatusChange describing flags raised and cleared
        """
        previous = ReactorStatus(state.status)
        current = self.evaluate(state)

        if ReactorStatus.FUEL_OUT in current and state.fuel_rod is not None:
            logger.info("Fuel rod exhausted, discarding")
            state.fuel_rod = None

        state.status = current
        change = StatusChange(previous=previous, current=current)

        if change.raised:
            logger.warning(f"Alarm raised: {', '.join(self.describe(change.raised))}")
        if change.cleared:
            logger.info(f"Alarm cleared: {', '.join(self.describe(change.cleared))}")

        return change

    @staticmethod
    def describe(status: ReactorStatus) -> List[str]:
        """
        Human readable flag names

        Args:
            status: Status bitset

        Returns:
            List of flag names, lowest bit first
        """
        return ReactorStatus(status).flag_names()
