"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class InvalidNumberError(ValueError):
    """Raised when an argument is not a plain unsigned decimal number."""

    def __init__(self, text: str) -> None:
        super().__init__("invalid atoi")
        self.text = text


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run, times in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def parse_number(text: str) -> int:
    """Parse an unsigned decimal number made of ASCII digits only.

    A leading sign, whitespace or any other character is rejected.
    An empty string reads as zero.
    """
    if any(not "0" <= ch <= "9" for ch in text):
        raise InvalidNumberError(text)
    return int(text) if text else 0


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from four or five arguments.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    if len(args) not in (4, 5):
        raise ValueError("nbr of arg not valid")
    numbers = [parse_number(arg) for arg in args]
    philosophers, time_to_die, time_to_eat, time_to_sleep = numbers[:4]
    meals_required = numbers[4] if len(numbers) == 5 else None
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals_required,
    )