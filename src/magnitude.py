from __future__ import annotations

from typing import Union


Natural = Union["Magnitude", int]


def _value_of(value: Natural) -> int:
    if isinstance(value, Magnitude):
        return value._value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected Magnitude or int, got {type(value).__name__}")
    if value < 0:
        raise ValueError("Magnitude can not be negative")
    return value


class Magnitude:
    """
    Mutable arbitrary-precision natural number.
    Mutators update the value in place and return None.
    """

    __slots__ = ("_value",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, Magnitude):
            raise TypeError("use Magnitude.copy() to clone a Magnitude")
        self._value = _value_of(value)

    @classmethod
    def from_str(cls, value: str) -> Magnitude:
        """Parses a decimal literal, e.g. '189943527'."""
        digits = value.strip()
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"invalid natural number literal: {value!r}")
        return cls(int(digits))

    def to_int(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Magnitude({self._value})"

    def diagnostic(self) -> str:
        return f"Magnitude[{self._value.bit_length()} bits]({self._value})"

    def is_zero(self) -> bool:
        return self._value == 0

    def copy(self) -> Magnitude:
        return Magnitude(self._value)

    def copy_from(self, other: Magnitude) -> None:
        self._value = _value_of(other)

    def clear(self) -> None:
        self._value = 0

    def add(self, other: Natural) -> None:
        self._value += _value_of(other)

    def subtract(self, other: Natural) -> None:
        """Requires self >= other."""
        value = _value_of(other)
        if value > self._value:
            raise ValueError("subtraction would make Magnitude negative")
        self._value -= value

    def divide(self, divisor: int) -> int:
        """Floor division by a small positive integer. Returns the remainder."""
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            raise TypeError(f"divisor must be int, got {type(divisor).__name__}")
        if divisor <= 0:
            raise ValueError("divisor must be positive")
        self._value, remainder = divmod(self._value, divisor)
        return remainder

    def power(self, exponent: int) -> None:
        """Exact exponentiation, 0^0 is 1."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise ValueError("exponent can not be negative")
        self._value **= exponent

    def compare_to(self, other: Natural) -> int:
        value = _value_of(other)
        return (self._value > value) - (self._value < value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Magnitude):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Natural) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Natural) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Natural) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Natural) -> bool:
        return self.compare_to(other) >= 0


def add(a: Natural, b: Natural) -> Magnitude:
    return Magnitude(_value_of(a) + _value_of(b))


def subtract(a: Natural, b: Natural) -> Magnitude:
    result = Magnitude(_value_of(a))
    result.subtract(b)
    return result


def divide_by_small_integer(a: Natural, d: int) -> Magnitude:
    result = Magnitude(_value_of(a))
    result.divide(d)
    return result


def power(a: Natural, exponent: int) -> Magnitude:
    result = Magnitude(_value_of(a))
    result.power(exponent)
    return result


def compare(a: Natural, b: Natural) -> int:
    return Magnitude(_value_of(a)).compare_to(b)


def copy(a: Magnitude) -> Magnitude:
    return a.copy()
