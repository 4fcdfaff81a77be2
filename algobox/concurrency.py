"""Dining philosophers, a producer/consumer buffer and threaded factorials."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from algobox.containers import ContainerEmptyError, ContainerFullError

__all__ = [
    "DiningTable",
    "BoundedBuffer",
    "simulate_dining",
    "factorial",
    "sum_of_factorials",
    "run_factorial_threads",
]

_THINKING = "thinking"
_HUNGRY = "hungry"
_EATING = "eating"


class DiningTable:
    """Philosophers round a table, sharing one fork between each pair.

    ``states`` holds each philosopher's state (``"thinking"``, ``"hungry"``
    or ``"eating"``) and ``events`` a log of what happened, numbered from 1.
    """

    def __init__(self, seats: int = 5) -> None:
        if seats < 1:
            raise ValueError("at least one seat is needed")
        self.seats = seats
        self.states = [_THINKING] * seats
        self.events: list[str] = []
        self._mutex = threading.Lock()
        self._turns = [threading.Semaphore(0) for _ in range(seats)]

    def _left(self, philosopher: int) -> int:
        return (philosopher + self.seats - 1) % self.seats

    def _right(self, philosopher: int) -> int:
        return (philosopher + 1) % self.seats

    def _validate(self, philosopher: int) -> None:
        if not 0 <= philosopher < self.seats:
            raise ValueError(f"no philosopher at seat {philosopher}")

    def _try_to_eat(self, philosopher: int) -> None:
        if (
            self.states[philosopher] == _HUNGRY
            and self.states[self._left(philosopher)] != _EATING
            and self.states[self._right(philosopher)] != _EATING
        ):
            self.states[philosopher] = _EATING
            number = philosopher + 1
            self.events.append(
                f"Philosopher {number} takes fork {self._left(philosopher) + 1} and {number}"
            )
            self.events.append(f"Philosopher {number} is Eating")
            self._turns[philosopher].release()

    def take_forks(self, philosopher: int) -> None:
        """Become hungry and block until both forks are free."""
        self._validate(philosopher)
        with self._mutex:
            self.states[philosopher] = _HUNGRY
            self.events.append(f"Philosopher {philosopher + 1} is Hungry")
            self._try_to_eat(philosopher)
        self._turns[philosopher].acquire()

    def put_forks(self, philosopher: int) -> None:
        """Put both forks down and let hungry neighbours eat."""
        self._validate(philosopher)
        with self._mutex:
            if self.states[philosopher] != _EATING:
                raise ValueError(f"philosopher {philosopher} is not eating")
            self.states[philosopher] = _THINKING
            number = philosopher + 1
            self.events.append(
                f"Philosopher {number} putting fork {self._left(philosopher) + 1} "
                f"and {number} down"
            )
            self.events.append(f"Philosopher {number} is thinking")
            self._try_to_eat(self._left(philosopher))
            self._try_to_eat(self._right(philosopher))


def simulate_dining(rounds: int, seats: int = 5) -> list[str]:
    """Let every philosopher eat ``rounds`` times concurrently; return the event log."""
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    table = DiningTable(seats)

    def dine(philosopher: int) -> None:
        for _ in range(rounds):
            table.take_forks(philosopher)
            table.put_forks(philosopher)

    threads = [threading.Thread(target=dine, args=(seat,)) for seat in range(seats)]
    for seat, thread in enumerate(threads):
        thread.start()
        with table._mutex:
            table.events.append(f"Philosopher {seat + 1} is thinking")
    for thread in threads:
        thread.join()
    return list(table.events)


class BoundedBuffer:
    """Producer/consumer counters over a buffer of ``capacity`` slots."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.full = 0
        self.empty = capacity
        self.item = 0
        self._lock = threading.Lock()

    def produce(self) -> int:
        """Produce the next item and return its number."""
        with self._lock:
            if self.empty == 0:
                raise ContainerFullError("buffer is full")
            self.full += 1
            self.empty -= 1
            self.item += 1
            return self.item

    def consume(self) -> int:
        """Consume the most recent item and return its number."""
        with self._lock:
            if self.full == 0:
                raise ContainerEmptyError("buffer is empty")
            self.full -= 1
            self.empty += 1
            consumed = self.item
            self.item -= 1
            return consumed


def factorial(n: int) -> int:
    """``n!`` computed by repeated multiplication."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def sum_of_factorials(n: int) -> int:
    """``1! + 2! + ... + n!``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    total = 0
    running = 1
    for k in range(1, n + 1):
        running *= k
        total += running
    return total


def run_factorial_threads(n: int) -> tuple[int, int]:
    """Compute ``n!`` and then the sum of factorials, each on a worker thread."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        first = pool.submit(factorial, n).result()
        second = pool.submit(sum_of_factorials, n).result()
    return first, second