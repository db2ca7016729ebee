# StackEvaluator.py
"""""
Evaluates a postfix token sequence with exact Decimal arithmetic.

Pipeline
--------
1) The postfix list is reversed and consumed with pop(), i.e. in postfix order.
2) Numbers / variables are pushed onto a local operand stack.
3) An operator pops the right operand first, then the left one, and pushes the
   result with trailing zeros stripped.
4) The single remaining value is the result; its scale is clamped to max_scale.

Every call builds its own stacks and its own decimal.Context, nothing is shared
between evaluations.
"""""
import math
import logging
import decimal
from decimal import Decimal

from . import error as E
from .config_manager import EvaluationConfig
from .Tokenizer import Number, Variable, Operator

logger = logging.getLogger(__name__)


# -----------------------------
# Decimal helpers
# -----------------------------

def exact_context():
    """Context wide enough that + - * never round."""
    return decimal.Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def scale(value):
    """Digits after the decimal point (negative for values like 1E+3)."""
    return -value.as_tuple().exponent


def strip_trailing_zeros(value, context):
    if value == 0:
        return Decimal(0)
    return value.normalize(context)


def to_decimal(name, value):
    """Normalize a variable value to a finite Decimal (via string to avoid float artifacts)."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise E.InvalidExpressionError(E.message_for("3034", f"{name}={value!r}"), code="3034")
    try:
        if isinstance(value, (Decimal, int)):
            converted = Decimal(value)
        else:
            converted = Decimal(str(value).strip())
    except decimal.InvalidOperation:
        raise E.InvalidExpressionError(E.message_for("3034", f"{name}={value!r}"), code="3034") from None
    if not converted.is_finite():
        raise E.InvalidExpressionError(E.message_for("3034", f"{name}={value!r}"), code="3034")
    return converted


def divide(dividend, divisor, max_scale, rounding):
    """dividend / divisor rounded once to at most max_scale fractional digits.

    The quotient is first computed with guard digits below max_scale under
    ROUND_05UP, so the final quantize sees the correct side of every rounding
    boundary. The precision follows the operands' magnitudes, not their exponents.
    """
    guard_context = exact_context()
    precision = dividend.adjusted() - divisor.adjusted() + max_scale + 3
    guard_context.prec = min(max(precision, 1), decimal.MAX_PREC)
    guard_context.rounding = decimal.ROUND_05UP

    quotient = guard_context.divide(dividend, divisor)
    if scale(quotient) <= max_scale:
        # exact and already short enough
        return quotient
    return quotient.quantize(Decimal(1).scaleb(-max_scale), rounding=rounding, context=exact_context())


def power(base, exponent):
    """base ^ exponent computed in double precision, rebuilt as a Decimal from its text."""
    try:
        result = math.pow(float(base), float(exponent))
    except OverflowError:
        raise E.InfiniteNumberError(E.message_for("3026"), code="3026") from None
    except ValueError:
        if base == 0 and exponent < 0:
            # 0 ^ -n is +/- infinity in IEEE arithmetic
            raise E.InfiniteNumberError(E.message_for("3026"), code="3026") from None
        raise E.NaNResultError(E.message_for("3032", f"{base}^{exponent}"), code="3032") from None

    if math.isnan(result):
        raise E.NaNResultError(E.message_for("3032", f"{base}^{exponent}"), code="3032")
    if math.isinf(result):
        raise E.InfiniteNumberError(E.message_for("3026"), code="3026")

    text = repr(result)
    if text.endswith(".0"):
        text = text[:-2]
    return Decimal(text)


# -----------------------------
# Evaluator
# -----------------------------

def apply_operator(symbol, op1, op2, config, context):
    """Compute op1 <symbol> op2 and strip trailing zeros from the result."""
    try:
        if symbol == '-':
            result = context.subtract(op1, op2)
        elif symbol == '+':
            result = context.add(op1, op2)
        elif symbol == '/':
            if op2 == 0:
                raise E.DivisionByZeroError(E.message_for("3003"), code="3003")
            result = divide(op1, op2, config.max_scale, config.rounding)
        elif symbol == '*':
            result = context.multiply(op1, op2)
        elif symbol == '^':
            result = power(op1, op2)
        else:
            raise E.InvalidExpressionError(E.message_for("3004", symbol), code="3004")
        return strip_trailing_zeros(result, context)

    # Exponent beyond MAX_EMAX
    except decimal.Overflow:
        raise E.InfiniteNumberError(E.message_for("3026"), code="3026") from None


def evaluate(postfix, variables=None, config=None):
    """Evaluate a postfix token sequence.

    Args:
        postfix: tokens in postfix order (see PostfixConverter.to_postfix)
        variables: optional mapping name -> value for Variable tokens
        config: EvaluationConfig; defaults to max_scale=14, half-even
    Returns:
        Decimal result, scale <= config.max_scale
    """
    if config is None:
        config = EvaluationConfig()

    if not postfix:
        return Decimal(0)

    context = exact_context()
    expr_stack = list(reversed(postfix))
    operands = []

    while expr_stack:
        current = expr_stack.pop()

        if isinstance(current, Number):
            operands.append(current.value)

        elif isinstance(current, Variable):
            if variables is None or current.name not in variables:
                raise E.InvalidExpressionError(E.message_for("3031", current.name), code="3031")
            value = to_decimal(current.name, variables[current.name])
            operands.append(value if current.sign > 0 else context.minus(value))

        elif isinstance(current, Operator):
            if len(operands) < 2:
                raise E.InvalidExpressionError(E.message_for("3027", current.symbol), code="3027")
            op2 = operands.pop()
            op1 = operands.pop()
            operands.append(apply_operator(current.symbol, op1, op2, config, context))

        else:
            raise E.InvalidExpressionError(E.message_for("3011", current), code="3011")

    if len(operands) != 1:
        raise E.InvalidExpressionError(
            E.message_for("3012", " ".join(str(token) for token in postfix)), code="3012")

    result = operands.pop()
    try:
        if scale(result) > config.max_scale:
            result = result.quantize(Decimal(1).scaleb(-config.max_scale), rounding=config.rounding, context=context)
    except decimal.Overflow:
        raise E.InfiniteNumberError(E.message_for("3026"), code="3026") from None
    if result.is_zero():
        # no negative zero: '-x' with x = 0, or a lone '-0'
        result = result.copy_abs()

    logger.debug("Result: %s", result)
    return result
