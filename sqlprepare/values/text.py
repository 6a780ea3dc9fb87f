"""Text literal."""

from ._bases import SqlValue


def quote(text: str) -> str:
    """Wrap text in single quotes. Embedded quotes are not escaped."""
    return f"'{text}'"


class TextValue(SqlValue):
    """String rendered between single quotes (e.g. ``'abc'``)."""

    value: str

    def render_literal(self) -> str:
        return quote(self.value)
