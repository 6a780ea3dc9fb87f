"""SELECT statement assembly from a table, a projection and predicates.

A ``Statement`` is a plain mutable record: ``select()`` and ``filter()`` replace
the projection and the predicate list wholesale, and ``render()`` reads them
to produce the query text::

    SELECT
      col_a,col_b
    FROM tbl
    WHERE
      (a = 1)
      AND (b IN (1,2))

Values are inlined as literals; there are no bound parameters.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pydantic import BaseModel

from .predicate import Predicate
from .utils.snake_case import snake_case

logger = logging.getLogger("sqlprepare")

INDENT = "  "


class Statement(BaseModel):
    """SELECT query builder for a single table."""

    model_config = {"validate_assignment": True}

    table: str
    """Table name, rendered verbatim."""
    columns: Optional[list[str]] = None
    """Projection as given by the caller. None or empty selects ``*``."""
    predicates: Optional[list[Predicate]] = None
    """WHERE conditions, joined with AND in this order. None or empty means no WHERE."""

    def __init__(self, table: str, **kwargs):
        super().__init__(table=table, **kwargs)

    # --- builder methods ---

    def select(self, columns: Optional[Iterable[str] | str]) -> Statement:
        """Replace the projection. Names are normalized with ``snake_case`` when rendered.

        A single string is one column name, not a sequence of characters.
        """
        if isinstance(columns, str):
            columns = [columns]
        self.columns = None if columns is None else list(columns)
        return self

    def filter(self, predicates: Optional[Iterable[Predicate]]) -> Statement:
        """Replace the predicate list."""
        self.predicates = None if predicates is None else list(predicates)
        return self

    set_projection = select
    set_predicates = filter

    @property
    def snake_columns(self) -> Optional[list[str]]:
        """Projection with every name passed through ``snake_case``, or None."""
        if self.columns is None:
            return None
        return [snake_case(column) for column in self.columns]

    # --- SQL-generating methods (sql_*) ---

    @property
    def sql_select(self) -> str:
        """SELECT clause, one indented line of comma-separated columns or ``*``."""
        columns = ",".join(self.snake_columns or ()) or "*"
        return f"SELECT\n{INDENT}{columns}\n"

    @property
    def sql_from(self) -> str:
        """FROM clause."""
        return f"FROM {self.table}\n"

    @property
    def sql_where(self) -> str:
        """WHERE clause with one parenthesized predicate per line, or empty string."""
        if not self.predicates:
            return ""
        lines = ["WHERE\n"]
        for index, predicate in enumerate(self.predicates):
            keyword = "AND " if index else ""
            lines.append(f"{INDENT}{keyword}({predicate.render()})\n")
        return "".join(lines)

    @property
    def sql(self) -> str:
        """Full query text: SELECT, FROM, then WHERE when there are predicates."""
        return self.sql_select + self.sql_from + self.sql_where

    def render(self) -> str:
        """Return the query text. Repeated calls on an unchanged statement give the same text."""
        logger.debug(
            "Rendering SELECT on %r with %d predicate(s)",
            self.table,
            len(self.predicates or ()),
        )
        return self.sql

    prepare = render
