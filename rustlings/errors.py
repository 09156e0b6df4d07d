"""Solutions to the error handling exercises."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width as strictly as a compiler's parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the cost of the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to compute a cost that does not fit in 32 bits")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""


class NegativeError(CreationError):
    """The number was negative."""

    def __init__(self, message: str = "number is negative") -> None:
        super().__init__(message)


class ZeroError(CreationError):
    """The number was zero."""

    def __init__(self, message: str = "number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed, or the number it holds is not positive."""

    def __init__(self, error: Exception) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        number = _parse_int(text, 64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error