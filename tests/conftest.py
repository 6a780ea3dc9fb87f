"""Shared fixtures for the sqlprepare tests: a fixed date and one predicate per value type."""

import datetime

import pytest

from sqlprepare import Comparison, Predicate


@pytest.fixture
def sample_date():
    return datetime.date(2024, 3, 5)


@pytest.fixture
def sample_predicates(sample_date):
    """One predicate per value type, in a fixed order."""
    return [
        Predicate(column="a", value=1, comparison=Comparison.EQ),
        Predicate(column="b", value=2.5, comparison=Comparison.LT),
        Predicate(column="c", value=sample_date, comparison=Comparison.GEQ),
        Predicate(column="d", value=None, comparison=Comparison.NEQ),
        Predicate(column="e", value=[1, 2, 3], comparison=Comparison.EQ),
        Predicate(column="f", value=["a", "b", "c", "d"], comparison=Comparison.NEQ),
    ]
