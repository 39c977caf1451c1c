"""Tests for the expression tokenizer."""

import pytest

from siconvert.errors import LexError
from siconvert.lexer import (
    AddOp,
    CloseParen,
    FactOp,
    Float,
    Integer,
    OpenParen,
    UnitString,
    join_tokens,
    lex,
)


def test_lex_numbers_and_operators():
    tokens = lex("3/4.7+2")
    assert tokens == [Integer(3), FactOp("/"), Float(pytest.approx(4.7)), AddOp("+"), Integer(2)]


def test_lex_discards_whitespace_around_units():
    assert lex("3 lbf+  2") == [Integer(3), UnitString("lbf"), AddOp("+"), Integer(2)]


def test_lex_parentheses_and_all_operators():
    tokens = lex("(1-2)*3")
    assert tokens == [
        OpenParen(),
        Integer(1),
        AddOp("-"),
        Integer(2),
        CloseParen(),
        FactOp("*"),
        Integer(3),
    ]


def test_lex_multi_digit_integer_accumulates():
    assert lex("12045") == [Integer(12045)]


def test_lex_float_fraction_digits():
    (token,) = lex("0.125")
    assert isinstance(token, Float)
    assert token.value == pytest.approx(0.125)


def test_lex_trailing_decimal_point_is_float():
    (token,) = lex("7.")
    assert isinstance(token, Float)
    assert token.value == 7.0


def test_lex_unit_followed_by_power():
    assert lex("m2") == [UnitString("m"), Integer(2)]
    assert lex("kg1 m1 s") == [
        UnitString("kg"),
        Integer(1),
        UnitString("m"),
        Integer(1),
        UnitString("s"),
    ]


def test_lex_whitespace_does_not_close_tokens():
    assert lex("1 2") == [Integer(12)]
    assert lex("k m") == [UnitString("km")]
    assert lex("kg m s") == [UnitString("kgms")]
    assert lex("4 . 2 5") == [Float(pytest.approx(4.25))]


def test_lex_empty_input():
    assert lex("") == []
    assert lex("   \t") == []


@pytest.mark.parametrize("text, position", [("3 % 2", 2), ("1.2.3", 3), ("2^3", 1), ("5 µm", 2), ("mµ", 1)])
def test_lex_rejects_bad_characters(text, position):
    with pytest.raises(LexError) as excinfo:
        lex(text)
    assert excinfo.value.position == position
    assert excinfo.value.stage == "lex"
    assert "^" in str(excinfo.value).splitlines()[-1]


def test_join_tokens_reconstructs_source_boundaries():
    text = "1 / (2.50 + 3) km / hr2"
    tokens = lex(text)
    assert join_tokens(tokens, sep="") == text.replace(" ", "")
    assert lex(join_tokens(tokens)) == tokens
