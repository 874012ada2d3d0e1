"""Threads, forks and the monitor of the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philosim.config import Config

_POLL_SECONDS = 0.0005


def timestamp_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One philosopher: an id, its two forks and a record of its meals."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    sim: Simulation
    last_meal_time: int
    meals_eaten: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)

    def grab_forks(self) -> bool:
        """Take both forks; return False, holding none, if that is not possible."""
        sim = self.sim
        if sim.is_over():
            return False
        self.left_fork.acquire()
        if not sim.print_status(self, "has taken a fork"):
            self.left_fork.release()
            return False
        if sim.is_over() or sim.config.philo_count == 1:
            self.left_fork.release()
            return False
        self.right_fork.acquire()
        if not sim.print_status(self, "has taken a fork"):
            self.left_fork.release()
            self.right_fork.release()
            return False
        return True

    def eat(self) -> None:
        """Eat with both forks held, then put them down."""
        sim = self.sim
        with sim.print_lock:
            self.meals_eaten += 1
            self.last_meal_time = timestamp_ms()
        sim.print_status(self, "is eating")
        sim.sleep_ms(sim.config.time_to_eat_ms)
        with sim.print_lock:
            required = sim.config.required_meals
            if required and self.meals_eaten == required:
                sim.satisfied_philos += 1
        self.left_fork.release()
        self.right_fork.release()

    def sleep_and_think(self) -> bool:
        """Sleep, then think; return False once the simulation is over."""
        sim = self.sim
        return (
            sim.print_status(self, "is sleeping")
            and sim.sleep_ms(sim.config.time_to_sleep_ms)
            and sim.print_status(self, "is thinking")
        )

    def run(self) -> None:
        """Repeat taking forks, eating, sleeping and thinking until stopped."""
        if self.id % 2 == 0:
            self.sim.sleep_ms(10)
        while self.grab_forks():
            self.eat()
            if not self.sleep_and_think():
                break


class Simulation:
    """A table of philosophers sharing forks, watched by a monitor."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.simulation_over = False
        self.satisfied_philos = 0
        count = config.philo_count
        self.forks = [threading.Lock() for _ in range(count)]
        self.start_time = timestamp_ms()
        self.philosophers = [
            Philosopher(
                id=index + 1,
                left_fork=self.forks[index],
                right_fork=self.forks[(index + 1) % count],
                sim=self,
                last_meal_time=self.start_time,
            )
            for index in range(count)
        ]

    def _emit(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def is_over(self) -> bool:
        """Return whether the simulation has ended."""
        with self.print_lock:
            return self.simulation_over

    def print_status(self, philosopher: Philosopher, message: str) -> bool:
        """Print a timestamped status line; return False if the run is over."""
        with self.print_lock:
            if self.simulation_over:
                return False
            elapsed = timestamp_ms() - self.start_time
            self._emit(f"{elapsed} {philosopher.id} {message}")
            return True

    def sleep_ms(self, ms: int) -> bool:
        """Sleep for ``ms`` milliseconds; return False early if the run ends."""
        start = timestamp_ms()
        while timestamp_ms() - start < ms:
            if self.is_over():
                return False
            time.sleep(_POLL_SECONDS)
        return True

    def check_end(self) -> bool:
        """End the run if a philosopher starved or all have eaten enough."""
        for philosopher in self.philosophers:
            with self.print_lock:
                starved = (
                    timestamp_ms() - philosopher.last_meal_time
                    >= self.config.time_to_die_ms
                )
                satisfied = self.satisfied_philos == self.config.philo_count
                if starved or satisfied:
                    self.simulation_over = True
                    if satisfied:
                        self._emit(
                            f"Every philosopher ate {self.config.required_meals} times"
                        )
                    else:
                        elapsed = timestamp_ms() - self.start_time
                        self._emit(f"{elapsed} {philosopher.id} died")
                    return True
        return False

    def monitor(self) -> None:
        """Watch the table until the simulation ends."""
        while not self.check_end():
            time.sleep(_POLL_SECONDS)

    def start(self) -> None:
        """Start one thread per philosopher."""
        for philosopher in self.philosophers:
            thread = threading.Thread(
                target=philosopher.run,
                name=f"philosopher-{philosopher.id}",
                daemon=True,
            )
            philosopher.thread = thread
            try:
                thread.start()
            except RuntimeError as exc:
                with self.print_lock:
                    self.simulation_over = True
                raise RuntimeError("Error while creating threads") from exc

    def join(self) -> None:
        """Wait for every philosopher thread to finish."""
        for philosopher in self.philosophers:
            if philosopher.thread is not None:
                philosopher.thread.join()

    def run(self) -> None:
        """Run the whole simulation: start, monitor until the end, join."""
        self.start()
        self.monitor()
        self.join()