"""
Grid Load Generator

Produces the time-varying electrical demand the reactor has to follow: a
bounded random walk modelling ambient demand drift, plus periodic demand
surges that decay linearly back to zero.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class GridLoadConfig:
    """Configuration for the grid load generator"""

    initial_base_load: float = 1000.0       # kW
    min_base_load: float = 800.0            # kW
    max_base_load: float = 2100.0           # kW
    walk_step: float = 12.0                 # kW, max drift per tick in either direction

    first_spike_delay: float = 10.0         # s simulated time until the first spike
    spike_interval: float = 10.0            # s minimum time between spike starts
    spike_interval_jitter: float = 5.0      # s uniform extra delay
    spike_duration: float = 10.0            # s
    spike_magnitude: float = 1000.0         # kW at spike start


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, ties away from zero"""
    return float(np.copysign(np.floor(abs(value) + 0.5), value))


class GridLoadGenerator:
    """
    Random-walk base load with linearly decaying spikes

    The spike timer only counts down while no spike is active; the next
    spike is scheduled at the moment the current one starts.
    """

    def __init__(self, config: Optional[GridLoadConfig] = None, seed: Optional[int] = None):
        """
        Initialize grid load generator

        Args:
            config: Generator configuration
            seed: Random seed for reproducible load curves (None for random)
        """
        self.config = config or GridLoadConfig()

        if seed is not None:
            self.rng = np.random.RandomState(seed)
        else:
            self.rng = np.random.RandomState()

        self.base_load = self.config.initial_base_load
        self.spike_timer = self.config.first_spike_delay
        self.is_spiking = False
        self.spike_elapsed = 0.0

    def update(self, dt: float) -> float:
        """
        Advance the generator by one tick

        Args:
            dt: Time step in seconds

        Returns:
            Grid demand in kW, rounded to a whole kilowatt
        """
        return round_half_away_from_zero(self._update_base_load() + self._update_spike(dt))

    def _update_base_load(self) -> float:
        cfg = self.config
        self.base_load += self.rng.uniform(-cfg.walk_step, cfg.walk_step)
        self.base_load = float(np.clip(self.base_load, cfg.min_base_load, cfg.max_base_load))
        return self.base_load

    def _update_spike(self, dt: float) -> float:
        cfg = self.config

        if not self.is_spiking:
            self.spike_timer -= dt
            if self.spike_timer <= 0:
                self.is_spiking = True
                self.spike_elapsed = 0.0
                self.spike_timer = cfg.spike_interval + self.rng.uniform(0.0, cfg.spike_interval_jitter)
            # a spike that just started contributes from the next tick on
            return 0.0

        self.spike_elapsed += dt
        if self.spike_elapsed >= cfg.spike_duration:
            self.is_spiking = False
            return 0.0

        return cfg.spike_magnitude * (1.0 - self.spike_elapsed / cfg.spike_duration)
