import threading

import pytest

from drillbox.counter import AtomicCounter, run_increments


def test_starts_at_given_value():
    assert AtomicCounter().value() == 0
    assert AtomicCounter(41).value() == 41


def test_increment_returns_new_value():
    counter = AtomicCounter()
    results = [counter.increment() for _ in range(5)]
    assert results == list(range(1, 6))
    assert counter.increment(10) == counter.value()


@pytest.mark.parametrize("workers, iterations", [(2, 10_000), (4, 2_500), (1, 0), (0, 5)])
def test_run_increments_counts_everything(workers, iterations):
    assert run_increments(workers, iterations) == workers * iterations


def test_concurrent_increments():
    counter = AtomicCounter()
    threads = [
        threading.Thread(target=lambda: [counter.increment() for _ in range(5000)])
        for _ in range(3)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.value() == 3 * 5000


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        run_increments(-1, 10)