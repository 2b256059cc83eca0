"""
Unit tests for the tick driver.
"""

import asyncio
import json
from unittest.mock import Mock

from reactor_sim import Reactor
from reactor_sim.server.broadcast import Broadcaster
from reactor_sim.server.driver import TickDriver


class TestTick:
    """Test a single tick."""

    def test_tick_advances_with_fixed_dt(self):
        reactor = Mock(wraps=Reactor(seed=1))
        driver = TickDriver(reactor, Broadcaster(), interval=1.0, dt=0.2)
        driver.tick()
        reactor.advance.assert_called_once_with(0.2)
        assert driver.tick_count == 1

    def test_changed_snapshot_published(self):
        async def scenario():
            broadcaster = Broadcaster()
            sub = broadcaster.subscribe()
            driver = TickDriver(Reactor(seed=1), broadcaster)
            assert driver.tick()
            return await sub.receive()

        message = asyncio.run(scenario())
        payload = json.loads(message)
        assert set(payload) == {
            "isPoweredOn", "isAutoControl", "temperature", "fissionRate",
            "turbineOutput", "powerOutput", "powerLoad", "fuelRod", "status",
        }

    def test_unchanged_snapshot_not_published(self, reactor):
        snapshot = reactor.snapshot()
        fake = Mock(spec=Reactor)
        fake.snapshot.return_value = snapshot
        broadcaster = Mock(spec=Broadcaster)

        driver = TickDriver(fake, broadcaster)
        assert driver.tick()
        assert not driver.tick()
        assert broadcaster.publish.call_count == 1
        assert fake.advance.call_count == 2


class TestRunLoop:
    """Test the periodic asyncio task."""

    def test_start_and_stop(self):
        async def scenario():
            driver = TickDriver(Reactor(seed=1), Broadcaster(), interval=0.01)
            driver.start()
            assert driver.is_running
            await asyncio.sleep(0.2)
            await driver.stop()
            return driver

        driver = asyncio.run(scenario())
        assert driver.tick_count > 1
        assert not driver.is_running

    def test_tick_failure_does_not_stop_loop(self, caplog):
        async def scenario():
            reactor = Mock(spec=Reactor)
            reactor.advance.side_effect = RuntimeError("boom")
            driver = TickDriver(reactor, Broadcaster(), interval=0.01)
            driver.start()
            await asyncio.sleep(0.1)
            running = driver.is_running
            await driver.stop()
            return reactor.advance.call_count, running

        with caplog.at_level("ERROR", logger="reactor_sim.server.driver"):
            calls, running = asyncio.run(scenario())
        assert calls > 1
        assert running
        assert "Tick failed" in caplog.text
