"""Print a sample statement covering every value type: ``python -m sqlprepare``."""

import datetime
import logging

from .comparison import Comparison
from .predicate import Predicate
from .statement import Statement


def demo_statement() -> Statement:
    """Statement on ``tbl`` with one predicate per value type."""
    return Statement("tbl").filter([
        Predicate(column="a", value=1, comparison=Comparison.EQ),
        Predicate(column="b", value=2.5, comparison=Comparison.LT),
        Predicate(column="c", value=datetime.datetime.now(datetime.timezone.utc), comparison=Comparison.GEQ),
        Predicate(column="d", value=None, comparison=Comparison.NEQ),
        Predicate(column="e", value=[1, 2, 3], comparison=Comparison.EQ),
        Predicate(column="f", value=["a", "b", "c", "d"], comparison=Comparison.NEQ),
    ])


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print(demo_statement().render())


if __name__ == "__main__":
    main()
