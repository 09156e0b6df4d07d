"""Solutions to the exercises on functions, conditionals, vectors and strings."""

from __future__ import annotations

from collections.abc import Iterable

COLOR_WORDS = frozenset({"green", "blue", "red"})


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def is_even(num: int) -> bool:
    return num % 2 == 0


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    return {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}.get(
        animal, "Unknown"
    )


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed-size array and a growable vector holding the same elements."""
    array = (10, 20, 30, 40)
    vector = [10, 20, 30, 40]
    return array, vector


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for index, element in enumerate(v):
        v[index] = element * 2
    return v


def vec_map(v: Iterable[int]) -> list[int]:
    """Return a new list holding every element doubled."""
    return [element * 2 for element in v]


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def is_a_color_word(attempt: str) -> bool:
    return attempt in COLOR_WORDS