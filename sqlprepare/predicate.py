"""Predicate: one column compared against one value."""

from typing import Any

from pydantic import BaseModel, field_validator

from .comparison import Comparison
from .values import SqlValue, to_sql_value


class Predicate(BaseModel):
    """A ``column <operator> literal`` condition.

    The operator depends on both ``comparison`` and the value's shape
    (e.g. ``IN`` for collections, ``IS`` for absent values). The column name
    is used as given.
    """

    model_config = {"frozen": True}

    column: str
    """Column name, rendered verbatim."""
    value: SqlValue
    """Value compared against; plain Python values are converted with ``to_sql_value``."""
    comparison: Comparison
    """Requested comparison, before operator resolution."""

    @field_validator("value", mode="before")
    @classmethod
    def convert_value(cls, value: Any) -> SqlValue:
        return to_sql_value(value)

    @property
    def operator(self) -> str:
        """Operator resolved for this predicate's value and comparison."""
        return self.value.operator_for(self.comparison)

    def render(self) -> str:
        """Return the condition, e.g. ``e IN (1,2,3)`` or ``d IS NOT NULL``."""
        return f"{self.column} {self.value.compare(self.comparison)}"

    @property
    def sql(self) -> str:
        """Same as ``render()``."""
        return self.render()
