"""sqlprepare: render Python values as SQL literals and assemble SELECT queries."""

from .comparison import Comparison
from .predicate import Predicate
from .statement import Statement
from .utils.snake_case import snake_case
from .values import (
    CollectionValue,
    DateValue,
    NumericValue,
    OptionalValue,
    SqlValue,
    TextValue,
    to_sql_value,
)

__all__ = [
    "CollectionValue",
    "Comparison",
    "DateValue",
    "NumericValue",
    "OptionalValue",
    "Predicate",
    "SqlValue",
    "Statement",
    "TextValue",
    "snake_case",
    "to_sql_value",
]
