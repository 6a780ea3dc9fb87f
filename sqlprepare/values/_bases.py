"""Base type for values rendered as SQL literals."""

from __future__ import annotations

from pydantic import BaseModel

from ..comparison import Comparison


class SqlValue(BaseModel):
    """Base type for every value that can appear on the right of a comparison.

    Subclasses implement ``render_literal``. The default ``operator_for``
    returns the standard operator for the comparison; value types whose
    operator depends on their runtime shape (absence, cardinality) override it.
    """

    model_config = {"frozen": True}

    def render_literal(self) -> str:
        """SQL literal for this value (e.g. ``42``, ``'abc'``, ``NULL``)."""
        raise NotImplementedError("Subclasses must implement `render_literal`")

    @property
    def sql(self) -> str:
        """SQL literal for this value; same as ``render_literal()``."""
        return self.render_literal()

    def operator_for(self, comparison: Comparison) -> str:
        """Operator text used to compare a column against this value."""
        return comparison.value

    def compare(self, comparison: Comparison) -> str:
        """Right-hand half of a predicate: operator and literal (e.g. ``IN (1,2)``)."""
        return f"{self.operator_for(comparison)} {self.render_literal()}"
