"""SQL value types.

Each value type knows how to render itself as a SQL literal (``render_literal()``
or ``.sql``) and which operator to use for each ``Comparison``
(``operator_for()``). Plain Python values are converted with ``to_sql_value``:
``None`` becomes an absent ``OptionalValue``, lists and tuples become a
``CollectionValue``, and scalars map to their numeric, text or date type.
"""

import datetime
import numbers
from decimal import Decimal
from typing import Any

from ._bases import SqlValue
from .collection import CollectionValue
from .numeric import NumericValue
from .optional import NULL, OptionalValue
from .temporal import DATE_FORMAT, DateValue
from .text import TextValue, quote


def _as_optional(value: SqlValue) -> OptionalValue:
    if isinstance(value, OptionalValue):
        return value
    return OptionalValue(value=value)


def to_sql_value(value: Any) -> SqlValue:
    """Return the SqlValue for a plain Python value (SqlValue instances are returned as is)."""
    if isinstance(value, SqlValue):
        return value
    if value is None:
        return OptionalValue()
    if isinstance(value, str):
        return TextValue(value=value)
    # datetime is a subclass of date
    if isinstance(value, datetime.date):
        return DateValue(value=value)
    if isinstance(value, bool):
        raise TypeError("Cannot convert bool to a SQL value")
    if isinstance(value, numbers.Integral):
        return NumericValue(value=int(value))
    if isinstance(value, Decimal):
        return NumericValue(value=value)
    if isinstance(value, numbers.Real):
        return NumericValue(value=float(value))
    if isinstance(value, (list, tuple)):
        elements = tuple(map(to_sql_value, value))
        # a None among the elements makes every element optional, e.g. (1,NULL)
        if any(isinstance(element, OptionalValue) for element in elements):
            elements = tuple(map(_as_optional, elements))
        return CollectionValue(values=elements)
    raise TypeError(f"Cannot convert `{value!r}`, {type(value)}, to a SQL value")


__all__ = [
    "DATE_FORMAT",
    "NULL",
    "CollectionValue",
    "DateValue",
    "NumericValue",
    "OptionalValue",
    "SqlValue",
    "TextValue",
    "quote",
    "to_sql_value",
]
