"""Collection of values, rendered as a single value or a parenthesized list."""

from __future__ import annotations

from pydantic import model_validator

from ..comparison import Comparison
from ._bases import SqlValue

# Operators replaced when the collection holds more than one element.
# Ordering comparisons keep their scalar operator whatever the size.
_PLURAL_OPERATORS: dict[Comparison, str] = {
    Comparison.EQ: "IN",
    Comparison.NEQ: "NOT IN",
}


class CollectionValue(SqlValue):
    """Ordered, homogeneous collection of values (e.g. ``(1,2,3)``).

    A single element renders without parentheses and compares with the
    scalar operators. An empty collection renders as ``()``, which is not
    valid SQL; it is accepted as is.
    """

    values: tuple[SqlValue, ...] = ()

    @model_validator(mode="after")
    def check_homogeneous(self):
        kinds = {type(value) for value in self.values}
        if len(kinds) > 1:
            names = ", ".join(sorted(kind.__name__ for kind in kinds))
            raise ValueError(f"Collection elements must share one value type, got: {names}")
        return self

    def __len__(self) -> int:
        return len(self.values)

    def render_literal(self) -> str:
        literals = [value.render_literal() for value in self.values]
        if len(literals) == 1:
            return literals[0]
        return "(" + ",".join(literals) + ")"

    def operator_for(self, comparison: Comparison) -> str:
        if len(self.values) > 1 and comparison in _PLURAL_OPERATORS:
            return _PLURAL_OPERATORS[comparison]
        return super().operator_for(comparison)
