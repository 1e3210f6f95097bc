"""Unit tests for the reader/writer lock."""
import threading
import time

import pytest

from pybf.rwlock import RWLock


@pytest.fixture
def lock():
    return RWLock()


def _spawn(target) -> threading.Thread:
    t = threading.Thread(target=target, daemon=True)
    t.start()
    return t


def test_readers_share(lock):
    """Two readers can hold the lock at the same time."""
    barrier = threading.Barrier(2, timeout=5)
    errors: list[BaseException] = []

    def reader():
        try:
            with lock.read_locked():
                barrier.wait()
        except threading.BrokenBarrierError as exc:
            errors.append(exc)

    threads = [_spawn(reader) for _ in range(2)]
    for t in threads:
        t.join(10)
    assert not errors


def test_writer_excludes_readers(lock):
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    with lock.write_locked():
        t = _spawn(reader)
        assert not acquired.wait(0.2)
    assert acquired.wait(5)
    t.join(5)


def test_writer_waits_for_readers(lock):
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    with lock.read_locked():
        t = _spawn(writer)
        assert not acquired.wait(0.2)
    assert acquired.wait(5)
    t.join(5)


def test_writers_exclude_each_other(lock):
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    with lock.write_locked():
        t = _spawn(writer)
        assert not acquired.wait(0.2)
    assert acquired.wait(5)
    t.join(5)


def test_waiting_writer_blocks_new_readers(lock):
    """Readers queue behind a pending writer and the writer goes first."""
    order: list[str] = []

    def writer():
        with lock.write_locked():
            order.append("writer")

    def reader():
        with lock.read_locked():
            order.append("reader")

    lock.acquire_read()
    w = _spawn(writer)
    deadline = time.monotonic() + 5
    while lock._waiting_writers == 0 and time.monotonic() < deadline:
        time.sleep(0.01)
    assert lock._waiting_writers == 1
    r = _spawn(reader)
    time.sleep(0.2)
    assert order == []
    lock.release_read()
    w.join(5)
    r.join(5)
    assert order == ["writer", "reader"]


def test_release_unheld(lock):
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_context_manager_releases_on_error(lock):
    with pytest.raises(KeyError):
        with lock.write_locked():
            raise KeyError("boom")
    with lock.read_locked():
        pass
    with lock.write_locked():
        pass
