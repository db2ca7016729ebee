# Tokenizer.py
"""""
Splits a canonical expression (see Normalizer) on whitespace and classifies every piece.

Token kinds
-----------
Number      decimal literal, e.g. '3', '-2.5', '.5', '1e3'
Variable    identifier with an optional sign, e.g. 'x', '-rate_2'
Operator    one of ^ * / + -
LeftParen   '('
RightParen  ')'
"""""
import re
from decimal import Decimal

from . import error as E

# Supported binary operators (kept as a string for quick membership checks)
Operations = "^*/+-"

_number_pattern = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE]\d+)?", re.ASCII)
_variable_pattern = re.compile(r"[+-]*[A-Za-z][A-Za-z0-9_]*")
_plain_variable_pattern = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


# -----------------------------
# Token types
# -----------------------------

class Token:
    """Base class: a token is identified by its kind and its text."""
    text = ""

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __hash__(self):
        return hash((type(self).__name__, self.text))

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"


class Number(Token):
    """Decimal literal."""
    def __init__(self, text):
        self.text = text

    @property
    def value(self):
        return Decimal(self.text)


class Variable(Token):
    """Named operand, resolved from the variable bindings at evaluation time."""
    def __init__(self, text):
        self.text = text
        signs = text[:len(text) - len(text.lstrip("+-"))]
        self.name = text[len(signs):]
        # Every '-' flips the sign
        self.sign = -1 if signs.count("-") % 2 else 1


class Operator(Token):
    def __init__(self, symbol):
        self.text = symbol

    @property
    def symbol(self):
        return self.text


class LeftParen(Token):
    text = "("


class RightParen(Token):
    text = ")"


# -----------------------------
# Predicates
# -----------------------------

def isNumber(text):
    """Return True if text is a finite decimal literal."""
    return bool(_number_pattern.fullmatch(text))


def isOp(text):
    """Return True if text is exactly one of the supported operators."""
    return len(text) == 1 and text in Operations


def isVariable(text, allow_sign=True):
    """Return True if text is a valid variable name ('NaN' is never one)."""
    if not text or text.strip() == "" or text == "NaN":
        return False
    if allow_sign:
        return bool(_variable_pattern.fullmatch(text))
    return bool(_plain_variable_pattern.fullmatch(text))


def isOperand(text):
    return isNumber(text) or isVariable(text, True)


# -----------------------------
# Tokenizer
# -----------------------------

def classify(piece):
    """Return the Token for a single whitespace-free piece of a canonical expression."""
    if isNumber(piece):
        return Number(piece)
    elif isVariable(piece, True):
        return Variable(piece)
    elif isOp(piece):
        return Operator(piece)
    elif piece == "(":
        return LeftParen()
    elif piece == ")":
        return RightParen()
    else:
        raise E.InvalidExpressionError(E.message_for("3011", piece), code="3011")


def tokenize(canonical):
    """Split canonical on whitespace runs and classify each piece."""
    return [classify(piece) for piece in canonical.split()]
