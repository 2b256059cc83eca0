"""
Unit tests for the reader-writer lock.
"""

import threading
import time

import pytest

from reactor_sim.rwlock import ReadWriteLock


class TestReadWriteLock:
    """Test shared and exclusive access."""

    def test_readers_share_lock(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(3, timeout=5)
        errors = []

        def reader():
            try:
                with lock.read_locked():
                    # all three readers must be inside at once to pass
                    barrier.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)
        assert not errors

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()
        assert not acquired.wait(0.1)

        lock.release_write()
        assert acquired.wait(5)
        thread.join(timeout=5)

    def test_reader_excludes_writer(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()
        assert not acquired.wait(0.1)

        lock.release_read()
        assert acquired.wait(5)
        thread.join(timeout=5)

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        writer_done = threading.Event()
        reader_done = threading.Event()

        def writer():
            with lock.write_locked():
                writer_done.set()

        def late_reader():
            with lock.read_locked():
                # the queued writer must have gone first
                assert writer_done.is_set()
                reader_done.set()

        lock.acquire_read()
        w = threading.Thread(target=writer)
        w.start()
        while not lock._writers_waiting:
            time.sleep(0.001)

        r = threading.Thread(target=late_reader)
        r.start()
        assert not reader_done.wait(0.1)

        lock.release_read()
        assert reader_done.wait(5)
        w.join(timeout=5)
        r.join(timeout=5)

    def test_unbalanced_release(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked():
                raise ValueError("boom")
        # would deadlock if the write lock leaked
        with lock.read_locked():
            pass
