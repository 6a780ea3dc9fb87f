"""Tests for sqlprepare.values.text: quoting without escaping."""

import pytest

from sqlprepare import Comparison
from sqlprepare.values import TextValue, quote


def test_text_is_single_quoted():
    assert TextValue(value="abc").render_literal() == "'abc'"


def test_text_embedded_quote_is_not_escaped():
    assert TextValue(value="O'Brien").render_literal() == "'O'Brien'"


def test_text_empty():
    assert TextValue(value="").sql == "''"


def test_quote():
    assert quote("x y") == "'x y'"


@pytest.mark.parametrize("comparison", list(Comparison))
def test_text_standard_operators(comparison):
    assert TextValue(value="a").operator_for(comparison) == comparison.value


def test_text_compare():
    assert TextValue(value="a").compare(Comparison.NEQ) == "<> 'a'"
