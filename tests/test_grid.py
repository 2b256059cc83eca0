"""
Unit tests for the grid load generator.
"""

import pytest

from reactor_sim import GridLoadConfig, GridLoadGenerator
from reactor_sim.grid import round_half_away_from_zero


def spike_only_config(**overrides):
    """Constant 1000 kW base with deterministic spike timing"""
    values = dict(
        initial_base_load=1000.0,
        walk_step=0.0,
        first_spike_delay=1.0,
        spike_interval_jitter=0.0,
    )
    values.update(overrides)
    return GridLoadConfig(**values)


class TestRounding:
    """Test tie rounding of the final load."""

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3.0), (3.5, 4.0), (1000.5, 1001.0), (1000.49, 1000.0), (-2.5, -3.0), (0.0, 0.0)],
    )
    def test_round_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected


class TestBaseLoad:
    """Test the random walk."""

    def test_base_load_bounded(self):
        generator = GridLoadGenerator(seed=3)
        for _ in range(5000):
            generator.update(0.2)
            assert 800.0 <= generator.base_load <= 2100.0

    def test_step_size_bounded(self):
        generator = GridLoadGenerator(GridLoadConfig(first_spike_delay=1e9), seed=5)
        previous = generator.base_load
        for _ in range(500):
            generator.update(0.2)
            assert abs(generator.base_load - previous) <= 12.0
            previous = generator.base_load

    def test_clamped_at_upper_bound(self):
        config = GridLoadConfig(initial_base_load=2100.0, walk_step=500.0, first_spike_delay=1e9)
        generator = GridLoadGenerator(config, seed=11)
        for _ in range(100):
            assert generator.update(0.2) <= 2100.0

    def test_output_is_whole_kilowatts(self):
        generator = GridLoadGenerator(seed=9)
        for _ in range(200):
            load = generator.update(0.2)
            assert load == int(load)

    def test_seed_reproducible(self):
        a = GridLoadGenerator(seed=42)
        b = GridLoadGenerator(seed=42)
        assert [a.update(0.2) for _ in range(300)] == [b.update(0.2) for _ in range(300)]


class TestSpikes:
    """Test spike scheduling and decay."""

    def test_no_spike_before_timer_expires(self):
        generator = GridLoadGenerator(spike_only_config())
        assert generator.update(0.5) == 1000.0
        assert not generator.is_spiking

    def test_spike_decays_linearly(self):
        generator = GridLoadGenerator(spike_only_config())
        generator.update(0.5)
        # timer reaches zero: spike starts, contributes from the next tick
        assert generator.update(0.5) == 1000.0
        assert generator.is_spiking

        assert generator.update(0.5) == 1950.0
        assert generator.update(0.5) == 1900.0
        assert generator.update(0.5) == 1850.0

    def test_spike_ends_after_duration(self):
        generator = GridLoadGenerator(spike_only_config())
        generator.update(0.5)
        generator.update(0.5)

        loads = [generator.update(0.5) for _ in range(20)]
        assert loads[-2] == 1050.0
        # elapsed reaches the 10 s duration on the 20th tick
        assert loads[-1] == 1000.0
        assert not generator.is_spiking

    def test_next_spike_scheduled_at_start(self):
        generator = GridLoadGenerator(spike_only_config(spike_interval=3.0))
        generator.update(0.5)
        generator.update(0.5)
        assert generator.spike_timer == 3.0

    def test_next_spike_timer_within_jitter(self):
        config = GridLoadConfig(first_spike_delay=0.1)
        for seed in range(20):
            generator = GridLoadGenerator(config, seed=seed)
            generator.update(0.2)
            assert generator.is_spiking
            assert 10.0 <= generator.spike_timer <= 15.0

    def test_timer_paused_while_spiking(self):
        generator = GridLoadGenerator(spike_only_config(spike_interval=3.0))
        generator.update(0.5)
        generator.update(0.5)
        for _ in range(5):
            generator.update(0.5)
        assert generator.spike_timer == 3.0

    def test_spikes_recur(self):
        generator = GridLoadGenerator(spike_only_config())
        loads = [generator.update(0.5) for _ in range(100)]
        starts = sum(
            1 for before, after in zip(loads, loads[1:]) if before == 1000.0 and after == 1950.0
        )
        assert starts >= 2
