"""Prices in tenge and orders of products at a unit price."""

from __future__ import annotations

import functools
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True)
class Price:
    """An amount of money, printed in tenge."""

    p: float = 0.0

    def __add__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.p + other.p)

    def __sub__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.p - other.p)

    def __neg__(self) -> Price:
        return Price(-self.p)

    def __mul__(self, factor: float) -> Price:
        if isinstance(factor, Price):
            return NotImplemented
        return Price(self.p * factor)

    def __rmul__(self, factor: float) -> Price:
        if isinstance(factor, Price):
            return NotImplemented
        return Price(factor * self.p)

    def __truediv__(self, divisor: float) -> Price:
        if isinstance(divisor, Price):
            return NotImplemented
        return Price(self.p / divisor)

    def __lt__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.p < other.p

    def __le__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.p <= other.p

    def __str__(self) -> str:
        return f"{self.p:g}tt"


def kzt(amount: float) -> Price:
    """Make a price from an amount in tenge."""
    return Price(float(amount))


def tt(amount: float) -> Price:
    """Make a price from an amount in tenge."""
    return Price(float(amount))


@dataclass
class Order:
    """A product ordered nr times at a unit price."""

    product: str
    unitprice: Price
    nr: int = 1

    def __post_init__(self) -> None:
        if self.nr < 0:
            raise ValueError("number of items cannot be negative")

    def totalprice(self) -> Price:
        return self.nr * self.unitprice

    def __str__(self) -> str:
        text = f"{self.product} {self.unitprice}"
        if self.nr != 1:
            text += f" ({self.nr} times)"
        return text