"""Tests for sqlprepare.values.optional: NULL rendering and IS / IS NOT operators."""

import pytest

from sqlprepare import Comparison
from sqlprepare.values import NULL, CollectionValue, NumericValue, OptionalValue, TextValue


def test_absent_renders_null():
    value = OptionalValue()
    assert value.is_absent
    assert value.render_literal() == NULL == "NULL"


def test_absent_equality_operators():
    value = OptionalValue(value=None)
    assert value.operator_for(Comparison.EQ) == "IS"
    assert value.operator_for(Comparison.NEQ) == "IS NOT"
    assert value.compare(Comparison.NEQ) == "IS NOT NULL"


@pytest.mark.parametrize("comparison", [Comparison.GT, Comparison.LT, Comparison.GEQ, Comparison.LEQ])
def test_absent_ordering_operators_unchanged(comparison):
    assert OptionalValue().operator_for(comparison) == comparison.value


def test_present_delegates_literal():
    assert OptionalValue(value=TextValue(value="x")).render_literal() == "'x'"
    assert OptionalValue(value=NumericValue(value=3)).render_literal() == "3"


@pytest.mark.parametrize("comparison", list(Comparison))
def test_present_standard_operators(comparison):
    value = OptionalValue(value=NumericValue(value=3))
    assert not value.is_absent
    assert value.operator_for(comparison) == comparison.value


def test_present_collection_keeps_scalar_operators():
    collection = CollectionValue(values=[NumericValue(value=i) for i in (1, 2, 3)])
    value = OptionalValue(value=collection)
    assert value.operator_for(Comparison.EQ) == "="
    assert value.operator_for(Comparison.NEQ) == "<>"
    assert value.render_literal() == "(1,2,3)"


def test_present_empty_collection_is_not_absent():
    value = OptionalValue(value=CollectionValue())
    assert not value.is_absent
    assert value.render_literal() == "()"
