"""Comparison kinds used when binding a value to a column."""

import enum


class Comparison(enum.Enum):
    """One of the six comparisons a predicate can express.

    Each member's value is the standard SQL operator for it; value types
    may substitute another operator (e.g. ``IN`` or ``IS``) through
    ``SqlValue.operator_for``.
    """

    EQ = "="
    NEQ = "<>"
    GT = ">"
    LT = "<"
    GEQ = ">="
    LEQ = "<="
