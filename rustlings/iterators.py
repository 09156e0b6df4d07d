"""Solutions to the iterator exercises."""

from __future__ import annotations

import math
from collections.abc import Iterable

U64_MAX = 2**64 - 1
NUMBERS = (27, 297, 38502, 81)
DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    return "".join(capitalize_first(word) for word in words)


class DivisionError(Exception):
    """A division that has no whole-number result."""


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, NotDivisibleError)
            and (self.dividend, self.divisor) == (other.dividend, other.divisor)
        )

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


def divide(a: int, b: int) -> int:
    """Divide a by b when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def _attempt(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as error:
        return error


def result_with_list() -> list[int]:
    """Divide every number, raising at the first failure."""
    return [divide(n, DIVISOR) for n in NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide every number, keeping each quotient or the error in its place."""
    return [_attempt(n, DIVISOR) for n in NUMBERS]


def factorial(num: int) -> int:
    """Return num! for a non-negative num whose factorial fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result