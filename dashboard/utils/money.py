"""Helpers for converting between major and minor currency units."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

MINOR_UNITS_PER_MAJOR = 100
# Largest value a 32 bit signed INTEGER column holds.
MAX_MINOR_UNITS = 2**31 - 1
MAX_AMOUNT = Decimal(MAX_MINOR_UNITS) / MINOR_UNITS_PER_MAJOR


def to_minor_units(amount: Union[Decimal, int, str]) -> int:
    """Return ``amount`` (major units) as a whole number of minor units.

    The multiplication happens on :class:`~decimal.Decimal` values so inputs
    such as ``"0.29"`` become ``29`` rather than ``28.999...``; half cents
    round away from zero.
    """

    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    cents = (value * MINOR_UNITS_PER_MAJOR).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    return int(cents)


def from_minor_units(cents: int) -> Decimal:
    """Return ``cents`` as a two place :class:`~decimal.Decimal` of major units."""

    return (Decimal(cents) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01"))


def format_cents(cents, symbol: str = "$") -> str:
    """Format minor units for display, e.g. ``4500`` -> ``"$45.00"``."""

    if cents is None:
        return ""
    value = from_minor_units(int(cents))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
