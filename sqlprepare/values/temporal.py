"""Date literal."""

import datetime

from ._bases import SqlValue
from .text import TextValue

DATE_FORMAT = "%Y-%m-%d"
"""Only the date component is kept, whatever the value's time or zone."""


class DateValue(SqlValue):
    """Date or datetime, rendered as a quoted ``YYYY-MM-DD`` string."""

    value: datetime.datetime | datetime.date

    def render_literal(self) -> str:
        return TextValue(value=self.value.strftime(DATE_FORMAT)).render_literal()
