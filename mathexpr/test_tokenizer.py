import pytest
from decimal import Decimal

from mathexpr import error as E
from mathexpr.Tokenizer import (
    tokenize, classify, isNumber, isOp, isVariable, isOperand,
    Number, Variable, Operator, LeftParen, RightParen,
)


def test_tokenize_classifies_every_piece():
    assert tokenize("( -x + 2.5 ) * y_1") == [
        LeftParen(),
        Variable("-x"),
        Operator("+"),
        Number("2.5"),
        RightParen(),
        Operator("*"),
        Variable("y_1"),
    ]


def test_tokenize_empty():
    assert tokenize("") == []


def test_numbers():
    for text in ["3", "-3", "+3", "2.5", ".5", "5.", "1e3", "0012"]:
        assert isNumber(text), text
    for text in ["", "-", "1.2.3", "1e", "1e-3", "x1", "nan", "inf", "Infinity", "1_000"]:
        assert not isNumber(text), text
    assert Number("-2.50").value == Decimal("-2.50")


def test_only_ascii_digits_are_numbers():
    for text in ["٣", "１２", "-٣.٥", "1e٣"]:
        assert not isNumber(text), text
        with pytest.raises(E.InvalidExpressionError) as info:
            classify(text)
        assert info.value.code == "3011"


def test_variables():
    for text in ["x", "X1", "rate_2", "-x", "+y", "--z"]:
        assert isVariable(text), text
    for text in ["", "1x", "_x", "x-y", "x.y", "NaN", " "]:
        assert not isVariable(text), text
    assert not isVariable("-x", allow_sign=False)
    assert isVariable("x", allow_sign=False)
    # nan / inf spellings are not numbers, so they may be names
    assert isVariable("nan") and isVariable("inf")


def test_variable_sign_is_collapsed():
    assert (Variable("x").name, Variable("x").sign) == ("x", 1)
    assert (Variable("-x").name, Variable("-x").sign) == ("x", -1)
    assert (Variable("+x").name, Variable("+x").sign) == ("x", 1)
    assert (Variable("--x").name, Variable("--x").sign) == ("x", 1)
    assert (Variable("-+-x").name, Variable("-+-x").sign) == ("x", 1)


def test_operators():
    for symbol in "^*/+-":
        assert isOp(symbol)
        assert classify(symbol) == Operator(symbol)
    assert not isOp("**")
    assert not isOp("%")
    assert not isOp("")


def test_operands():
    assert isOperand("12")
    assert isOperand("-abc")
    assert not isOperand("+")


def test_unclassifiable_token_is_rejected():
    for piece in ["2x", "3%", "a.b", "NaN", "#"]:
        with pytest.raises(E.InvalidExpressionError) as info:
            classify(piece)
        assert info.value.code == "3011"


def test_token_text():
    assert str(Variable("-x")) == "-x"
    assert str(LeftParen()) == "("
    assert repr(Number("7")) == "Number('7')"
    assert Number("7") != Variable("x")
