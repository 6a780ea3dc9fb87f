"""Optional value: either another value or SQL NULL."""

from __future__ import annotations

from typing import Optional

from ..comparison import Comparison
from ._bases import SqlValue

NULL = "NULL"

# Operators replaced when the value is absent; ordering comparisons are kept.
_NULL_OPERATORS: dict[Comparison, str] = {
    Comparison.EQ: "IS",
    Comparison.NEQ: "IS NOT",
}


class OptionalValue(SqlValue):
    """Wrapper around a value that may be absent.

    An absent value renders as ``NULL`` and compares with ``IS`` / ``IS NOT``.
    A present value renders as the wrapped value but always keeps the
    standard operators, even when the wrapped value would override them.
    """

    value: Optional[SqlValue] = None

    @property
    def is_absent(self) -> bool:
        return self.value is None

    def render_literal(self) -> str:
        if self.value is None:
            return NULL
        return self.value.render_literal()

    def operator_for(self, comparison: Comparison) -> str:
        if self.value is None and comparison in _NULL_OPERATORS:
            return _NULL_OPERATORS[comparison]
        return super().operator_for(comparison)
