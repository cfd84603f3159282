"""Result types for railway-oriented programming.

Upstream calls and query handlers never raise for expected failures
(timeouts, bad status codes, malformed payloads). They return a Result and
the caller decides what to do with it.

Usage:
    def parse_films_count(raw: str) -> Result[int, str]:
        if not raw.lstrip("-").isdigit():
            return Failure(error="filmsCount must be an integer")
        return Success(value=int(raw))

    result = parse_films_count("2")
    match result:
        case Success(value=count):
            print(f"Threshold: {count}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
