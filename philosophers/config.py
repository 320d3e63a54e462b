"""Simulation settings read from the command line."""

from dataclasses import dataclass
from typing import Optional, Sequence

from philosophers.timing import parse_int

ARGUMENT_COUNT_MESSAGE = "4 arguments required.\n ./philo x x x x\n"
INVALID_MESSAGE = "INVALID INPUT\nAll values must be positives"


class InvalidInput(ValueError):
    """Raised when the command-line arguments cannot start a simulation."""


@dataclass(frozen=True)
class Config:
    """Parameters of one dinner; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None


def _positive(text: str) -> int:
    try:
        value = parse_int(text)
    except ValueError as exc:
        raise InvalidInput(INVALID_MESSAGE) from exc
    if value < 1:
        raise InvalidInput(INVALID_MESSAGE)
    return value


def parse_arguments(args: Sequence[str]) -> Config:
    """Build a Config from four or five positive integer arguments."""
    if len(args) not in (4, 5):
        raise InvalidInput(ARGUMENT_COUNT_MESSAGE)
    philosophers, die, eat, sleep = (_positive(arg) for arg in args[:4])
    meals = _positive(args[4]) if len(args) == 5 else None
    return Config(
        philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals=meals,
    )