"""
Simulation Constants

Physical constants shared by the reactor model, the auto controller and the
status evaluator. Values are immutable once the process has started.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class SimulationConstants:
    """Physical limits and rates of the simulated reactor"""

    max_temp: float = 1000.0                    # °C gauge ceiling
    max_power_output: float = 5000.0            # kW
    meltdown_temp: float = 900.0                # °C
    overheat_temp: float = 600.0                # °C
    low_temp: float = 200.0                     # °C
    optimal_temp: float = 350.0                 # °C auto-control target
    fuel_consumption_rate: float = 0.05         # % condition per second at 100% fission
    heat_generation_rate: float = 800.0         # °C per second at 100% fission
    ambient_temp_dissipation: float = 0.05      # fraction of temperature lost per second
    turbine_power_factor: float = 8.0           # kW per unit of turbine heat draw
    low_fuel_threshold: float = 20.0            # % condition

    def as_wire_dict(self) -> Dict[str, float]:
        """Constants keyed by their upper-case names, as published to clients"""
        return {name.upper(): value for name, value in asdict(self).items()}


DEFAULT_CONSTANTS = SimulationConstants()
