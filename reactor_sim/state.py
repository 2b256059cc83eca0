"""
Reactor State

Data structures describing the simulated reactor: the status flag bitset,
the fuel rod, the mutable state owned by the reactor model and the immutable
snapshot handed out to readers.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import List, Optional

from .constants import DEFAULT_CONSTANTS, SimulationConstants


class ReactorStatus(IntFlag):
    """Alarm flags. Bit positions are part of the wire format."""
    NONE = 0
    TEMP_LOW = 1 << 0
    OVERHEAT = 1 << 1
    OUTPUT_LOW = 1 << 2
    OUTPUT_HIGH = 1 << 3
    FUEL_LOW = 1 << 4
    FUEL_OUT = 1 << 5
    MELTDOWN = 1 << 6
    SCRAM = 1 << 7

    def flag_names(self) -> List[str]:
        """Names of the individual flags set, lowest bit first"""
        return [flag.name for flag in ReactorStatus if flag and flag in self]


HEAT_FLAGS = ReactorStatus.TEMP_LOW | ReactorStatus.OVERHEAT | ReactorStatus.MELTDOWN
OUTPUT_FLAGS = ReactorStatus.OUTPUT_LOW | ReactorStatus.OUTPUT_HIGH


@dataclass(frozen=True)
class FuelRod:
    """Fuel rod installed in the core"""
    condition: float = 100.0  # % remaining


@dataclass
class ReactorState:
    """Current state of the reactor, owned and mutated by the reactor model"""

    is_powered_on: bool = True
    is_auto_control: bool = True

    temperature: float = 350.0      # °C
    fission_rate: float = 0.0       # %
    turbine_output: float = 0.0     # %
    power_output: float = 0.0       # kW
    power_load: float = 0.0         # kW demanded by the grid

    fuel_rod: Optional[FuelRod] = field(default_factory=FuelRod)
    status: ReactorStatus = ReactorStatus.NONE

    def __post_init__(self):
        self.status = ReactorStatus(self.status)


@dataclass(frozen=True)
class ReactorSnapshot:
    """Immutable point-in-time copy of the reactor state"""

    is_powered_on: bool
    is_auto_control: bool
    temperature: float
    fission_rate: float
    turbine_output: float
    power_output: float
    power_load: float
    fuel_rod: Optional[FuelRod]
    status: ReactorStatus

    @classmethod
    def of(cls, state: ReactorState) -> "ReactorSnapshot":
        # FuelRod is frozen, sharing the reference is safe
        return cls(
            is_powered_on=state.is_powered_on,
            is_auto_control=state.is_auto_control,
            temperature=state.temperature,
            fission_rate=state.fission_rate,
            turbine_output=state.turbine_output,
            power_output=state.power_output,
            power_load=state.power_load,
            fuel_rod=state.fuel_rod,
            status=ReactorStatus(state.status),
        )


def create_balanced_state(
    initial_load: float = 1000.0,
    constants: SimulationConstants = DEFAULT_CONSTANTS,
) -> ReactorState:
    """
    Create a reactor state balanced at the optimal operating temperature

    Turbine output is chosen so the turbine delivers exactly the initial load
    at the optimal temperature, and fission rate so that generated heat
    matches the heat drawn by the turbine plus ambient losses.

    Args:
        initial_load: Grid demand the reactor starts out supplying (kW)
        constants: Simulation constants

    Returns:
        ReactorState in equilibrium
    """
    temperature = constants.optimal_temp
    efficiency = temperature / constants.overheat_temp
    turbine_output = initial_load / (
        temperature / 100.0 * efficiency * constants.turbine_power_factor
    )

    heat_consumed = (
        initial_load / constants.turbine_power_factor
        + temperature * constants.ambient_temp_dissipation
    )
    fission_rate = heat_consumed * 100.0 / constants.heat_generation_rate

    return ReactorState(
        is_powered_on=True,
        is_auto_control=True,
        temperature=temperature,
        fission_rate=fission_rate,
        turbine_output=turbine_output,
        power_output=initial_load,
        power_load=initial_load,
        fuel_rod=FuelRod(condition=100.0),
        status=ReactorStatus.NONE,
    )
