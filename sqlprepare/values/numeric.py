"""Numeric literal."""

import math
from decimal import Decimal

from pydantic import field_validator

from ._bases import SqlValue


def format_float(value: float) -> str:
    """Shortest round-tripping digits in positional notation, without a trailing ``.0``.

    ``1e20`` gives ``100000000000000000000``, ``1e-7`` gives ``0.0000001``,
    ``1.0`` gives ``1``. Infinities and NaN keep their ``repr``.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class NumericValue(SqlValue):
    """Integer, float or decimal, rendered in its plain decimal form (e.g. ``42``, ``2.5``)."""

    value: int | float | Decimal

    @field_validator("value", mode="before")
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("booleans are not numeric SQL values")
        return value

    def render_literal(self) -> str:
        if isinstance(self.value, float):
            return format_float(self.value)
        if isinstance(self.value, Decimal):
            # decimals keep their own digits, exponent expanded
            return format(self.value, "f")
        return str(self.value)
