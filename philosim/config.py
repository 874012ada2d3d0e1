"""Command-line arguments for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")

_USAGE_LINES = (
    "Usage: ./philo arg1 arg2 arg3 arg4 [arg5]",
    "Arg#    Name                        \t\t\tType        Range",
    "arg1    number_of_philosophers      \t\t\tmandatory   > 0",
    "arg2    time_to_die (ms)            \t\t\tmandatory   > 0",
    "arg3    time_to_eat (ms)            \t\t\tmandatory   > 0",
    "arg4    time_to_sleep (ms)          \t\t\tmandatory   > 0",
    "arg5    number_of_times_each_philosopher_must_eat\toptional    > 0",
)


def usage_text() -> str:
    """Return the usage message shown when the arguments are invalid."""
    return "\n".join(_USAGE_LINES)


class UsageError(ValueError):
    """Raised when the command-line arguments are not acceptable."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else usage_text())


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation run.

    ``required_meals`` of 0 means the run only ends when a philosopher dies.
    """

    philo_count: int
    time_to_die_ms: int
    time_to_eat_ms: int
    time_to_sleep_ms: int
    required_meals: int = 0


def parse_positive_int(text: str) -> int:
    """Parse a string of ASCII digits into a strictly positive integer."""
    if not text or not set(text) <= _DIGITS:
        raise UsageError()
    value = int(text)
    if value == 0:
        raise UsageError()
    return value


def parse_args(argv: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    if not 4 <= len(argv) <= 5:
        raise UsageError()
    philo_count, time_to_die, time_to_eat, time_to_sleep = (
        parse_positive_int(arg) for arg in argv[:4]
    )
    required_meals = parse_positive_int(argv[4]) if len(argv) == 5 else 0
    return Config(
        philo_count=philo_count,
        time_to_die_ms=time_to_die,
        time_to_eat_ms=time_to_eat,
        time_to_sleep_ms=time_to_sleep,
        required_meals=required_meals,
    )