"""Threaded simulation of the dining philosophers."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philo.settings import Settings

_FORK_POLL_S = 0.001
_SLEEP_POLL_S = 0.0002
_MONITOR_POLL_S = 0.001
_ODD_SEAT_DELAY_S = 0.0001


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class Philosopher:
    """One seat at the table with its two forks and its meal record."""

    seat: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int
    meals: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def number(self) -> int:
        """The one-based number shown in the log."""
        return self.seat + 1


class Table:
    """Shared state of one simulation: forks, philosophers and the stop flag."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self._stopped = False
        self._state_lock = threading.Lock()
        self._print_lock = threading.Lock()
        count = settings.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                seat=seat,
                left_fork=self.forks[seat],
                right_fork=self.forks[(seat + 1) % count],
                last_meal=self.start_time,
            )
            for seat in range(count)
        ]

    def elapsed_ms(self) -> int:
        """Milliseconds since the table was laid."""
        return now_ms() - self.start_time

    def stopped(self) -> bool:
        """Whether the simulation has ended."""
        with self._state_lock:
            return self._stopped

    def stop(self) -> None:
        """End the simulation."""
        with self._state_lock:
            self._stopped = True

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def report(self, seat: int, status: str) -> None:
        """Log a status line for the philosopher at ``seat`` unless stopped."""
        if self.stopped():
            return
        with self._print_lock:
            if self.stopped():
                return
            self._write(f"{self.elapsed_ms()} Philosopher {seat + 1} {status}")

    def sleep(self, duration_ms: int) -> None:
        """Sleep for ``duration_ms``, waking early once the simulation stops."""
        start = now_ms()
        while not self.stopped():
            if now_ms() - start >= duration_ms:
                break
            time.sleep(_SLEEP_POLL_S)

    def pause(self, duration_ms: int) -> None:
        """Wait for ``duration_ms`` with a poll interval scaled to the table size."""
        count = self.settings.philosophers
        if count > 100:
            interval = 0.0005
        elif count > 50:
            interval = 0.0001
        else:
            interval = 0.00005
        start = now_ms()
        while now_ms() - start < duration_ms:
            if self.stopped():
                break
            time.sleep(interval)

    def _take(self, fork: threading.Lock) -> bool:
        """Acquire ``fork``; give up and hold nothing if the simulation stops."""
        while not fork.acquire(timeout=_FORK_POLL_S):
            if self.stopped():
                return False
        if self.stopped():
            fork.release()
            return False
        return True

    def dine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think in a loop until the simulation stops."""
        settings = self.settings
        seat = philosopher.seat
        if seat % 2:
            time.sleep(_ODD_SEAT_DELAY_S)
        if seat % 2 == 0:
            first, first_name = philosopher.left_fork, "get left fork"
            second, second_name = philosopher.right_fork, "get right fork"
        else:
            first, first_name = philosopher.right_fork, "get right fork"
            second, second_name = philosopher.left_fork, "get left fork"

        while not self.stopped():
            if not self._take(first):
                return
            self.report(seat, first_name)
            if not self._take(second):
                first.release()
                return
            self.report(seat, second_name)

            with philosopher.lock:
                self.report(seat, "is eating")
                philosopher.last_meal = now_ms()
            self.sleep(settings.time_to_eat)
            with philosopher.lock:
                philosopher.meals += 1

            second.release()
            first.release()

            if self.stopped():
                return
            self.report(seat, "is sleeping")
            self.sleep(settings.time_to_sleep)

            if self.stopped():
                return
            self.report(seat, "is thinking")
            if settings.philosophers % 2 == 1:
                self.pause(settings.time_to_eat * 2 - settings.time_to_sleep)

    def monitor(self) -> int | None:
        """Watch for starvation or for every philosopher having eaten enough.

        Returns the number of the philosopher who died, or ``None`` when the
        run ended because everyone ate the required number of meals.
        """
        settings = self.settings
        required = settings.meals_required
        while True:
            all_ate = True
            for philosopher in self.philosophers:
                with philosopher.lock:
                    last_meal = philosopher.last_meal
                    meals = philosopher.meals
                if now_ms() - last_meal > settings.time_to_die:
                    self.stop()
                    with self._print_lock:
                        self._write(
                            f"{self.elapsed_ms()} Philosopher "
                            f"{philosopher.number} died"
                        )
                    return philosopher.number
                if required is not None and meals < required:
                    all_ate = False
            if required is not None and all_ate:
                self.stop()
                with self._print_lock:
                    self._write("All philosophers have eaten!")
                return None
            time.sleep(_MONITOR_POLL_S)

    def run(self) -> int | None:
        """Run the simulation to its end; returns what :meth:`monitor` returns."""
        threads = [
            threading.Thread(target=self.dine, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        outcome: list[int | None] = []
        watcher = threading.Thread(
            target=lambda: outcome.append(self.monitor()), daemon=True
        )
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()
        return outcome[0] if outcome else None