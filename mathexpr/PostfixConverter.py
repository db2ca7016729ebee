# PostfixConverter.py
"""""
Infix -> postfix (shunting-yard) conversion.

Priorities
----------
    (  1
    -  2
    +  3
    /  4
    *  5
    ^  6

An operator pops every stacked operator whose priority is >= its own before it
is pushed. '-' and '+' do NOT share a level: '+' binds tighter, so "5-2+1"
becomes "5 2 1 + -" and evaluates to 2. Likewise "2/3*4" becomes "2 3 4 * /".
Existing results depend on this table; do not reorder it.
"""""
import logging

from . import error as E
from .Tokenizer import Number, Variable, Operator, LeftParen, RightParen

logger = logging.getLogger(__name__)

OPERATOR_PRIORITY = {
    "(": 1,
    "-": 2,
    "+": 3,
    "/": 4,
    "*": 5,
    "^": 6,
}


def get_operator_priority(symbol):
    """Return the priority of an operator or '('; raise InvalidExpressionError for anything else."""
    try:
        return OPERATOR_PRIORITY[str(symbol)]
    except KeyError:
        raise E.InvalidExpressionError(E.message_for("3004", symbol), code="3004") from None


def to_postfix(tokens):
    """Convert a classified infix token sequence to a postfix token list.

    Parentheses never appear in the output.
    """
    postfix = []
    stack = []

    for token in tokens:
        if isinstance(token, (Number, Variable)):
            postfix.append(token)

        elif isinstance(token, Operator):
            priority = get_operator_priority(token.symbol)
            while stack and get_operator_priority(stack[-1]) >= priority:
                postfix.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            if not stack:
                raise E.InvalidExpressionError(E.message_for("3010"), code="3010")
            item = stack.pop()
            while not isinstance(item, LeftParen):
                postfix.append(item)
                if not stack:
                    raise E.InvalidExpressionError(E.message_for("3010"), code="3010")
                item = stack.pop()

        else:
            raise E.InvalidExpressionError(E.message_for("3011", token), code="3011")

    while stack:
        item = stack.pop()
        if isinstance(item, LeftParen):
            raise E.InvalidExpressionError(E.message_for("3009"), code="3009")
        postfix.append(item)

    logger.debug("Postfix: %s", " ".join(str(token) for token in postfix))
    return postfix
