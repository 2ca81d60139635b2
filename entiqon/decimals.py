"""Exact decimal numbers backed by rational arithmetic."""

from __future__ import annotations

from fractions import Fraction
from typing import Union

DecimalLike = Union["Decimal", str, int, float]


def _to_fraction(value: object) -> Fraction:
    if isinstance(value, Decimal):
        return value._r
    if isinstance(value, bool):
        raise TypeError(f"unsupported type {type(value).__name__} for decimal parsing")
    if isinstance(value, str):
        if not value or value != value.strip() or "_" in value:
            raise ValueError(f"invalid decimal string: {value!r}")
        try:
            return Fraction(value)
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"invalid decimal string: {value!r}") from None
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        try:
            return Fraction(value)
        except (ValueError, OverflowError):
            raise ValueError(f"invalid decimal value: {value!r}") from None
    raise TypeError(f"unsupported type {type(value).__name__} for decimal parsing")


class Decimal:
    """An immutable, exact rational number."""

    __slots__ = ("_r",)

    def __init__(self, value: DecimalLike) -> None:
        self._r = _to_fraction(value)

    @classmethod
    def _from_fraction(cls, fraction: Fraction) -> "Decimal":
        result = cls.__new__(cls)
        result._r = fraction
        return result

    def __str__(self) -> str:
        """Canonical form: "numerator/denominator", or just the integer."""
        return str(self._r)

    def __repr__(self) -> str:
        return f"Decimal({str(self)!r})"

    def __float__(self) -> float:
        return float(self._r)

    def __add__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal._from_fraction(self._r + other._r)

    def __sub__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal._from_fraction(self._r - other._r)

    def __mul__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal._from_fraction(self._r * other._r)

    def __truediv__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        if other._r == 0:
            raise ZeroDivisionError("division by zero")
        return Decimal._from_fraction(self._r / other._r)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self._r == other._r

    def __hash__(self) -> int:
        return hash(self._r)


def parse_from(value: DecimalLike) -> Decimal:
    """Convert a Decimal, string, int or float into a Decimal.

    Raises ValueError for malformed strings and TypeError for other types.
    """
    return Decimal(value)


def must_new(value: DecimalLike) -> Decimal:
    """Create a Decimal, raising on invalid input; handy for constants."""
    return parse_from(value)