# ExpressionEngine.py
"""""
Public entry point for expression evaluation.

Pipeline
--------
1) Normalizer: raw text -> canonical, space separated form (done once, on set_expression)
2) Tokenizer: canonical form -> Number / Variable / Operator / paren tokens
3) PostfixConverter: infix tokens -> postfix tokens (shunting-yard)
4) StackEvaluator: postfix tokens + variable bindings -> Decimal

MathExpression keeps the canonical expression plus its max scale and rounding mode.
Setters validate first and only then assign, so a rejected value leaves the previous
state in place. Evaluation itself keeps no state on the instance.
"""""
import logging
from decimal import Decimal

from . import error as E
from . import config_manager as config_manager
from . import Normalizer
from . import Tokenizer
from . import PostfixConverter
from . import StackEvaluator

logger = logging.getLogger(__name__)


class MathExpression:
    """A math expression with the scale / rounding used to evaluate it.

        >>> MathExpression("x + 2*y").evaluate({"x": 1, "y": 3})
        Decimal('7')
    """

    DEFAULT_MAX_SCALE = config_manager.DEFAULT_MAX_SCALE
    DEFAULT_ROUNDING_MODE = config_manager.DEFAULT_ROUNDING_MODE

    def __init__(self, expression=None, max_scale=DEFAULT_MAX_SCALE, rounding_mode=DEFAULT_ROUNDING_MODE):
        self._expression = ""
        self._config = config_manager.EvaluationConfig(max_scale, rounding_mode)
        self.set_expression(expression)

    # -----------------------------
    # Properties / setters
    # -----------------------------

    @property
    def expression(self):
        """The canonical (normalized) expression."""
        return self._expression

    @property
    def max_scale(self):
        return self._config.max_scale

    @property
    def rounding_mode(self):
        return self._config.rounding_mode

    @property
    def config(self):
        return self._config

    def set_expression(self, expression):
        """Normalize and store a new expression (None clears it)."""
        if expression is not None and not isinstance(expression, str):
            raise E.InvalidExpressionError(
                E.message_for("3033", type(expression).__name__), code="3033", equation=expression)
        self._expression = Normalizer.normalize(expression)
        logger.debug("Canonical expression: %r", self._expression)

    def set_max_scale(self, max_scale):
        """Max scale must be inside [1, 32]."""
        self._config = config_manager.EvaluationConfig(max_scale, self._config.rounding_mode)

    def set_rounding_mode(self, rounding_mode):
        """Any mode from config_manager.ROUNDING_MODES; 'unnecessary' is rejected."""
        self._config = config_manager.EvaluationConfig(self._config.max_scale, rounding_mode)

    # -----------------------------
    # Queries
    # -----------------------------

    def tokens(self):
        return Tokenizer.tokenize(self._expression)

    def postfix_tokens(self):
        return PostfixConverter.to_postfix(self.tokens())

    def to_postfix(self):
        """Return the expression in postfix notation, tokens joined by single spaces."""
        return " ".join(str(token) for token in self.postfix_tokens())

    def to_postfix_stack(self):
        """Return the postfix tokens as a stack: pop() yields them in postfix order."""
        return [str(token) for token in reversed(self.postfix_tokens())]

    def evaluate(self, variables=None):
        """Evaluate with optional variable bindings (name -> Decimal / int / str).

        Raises:
            InvalidExpressionError, DivisionByZeroError, NaNResultError, InfiniteNumberError
        """
        try:
            if self._expression.count("(") != self._expression.count(")"):
                code = "3009" if self._expression.count("(") > self._expression.count(")") else "3010"
                raise E.InvalidExpressionError(E.message_for(code), code=code)

            return StackEvaluator.evaluate(self.postfix_tokens(), variables, self._config)

        # Attach the source expression and re-raise
        except E.MathError as e:
            e.equation = self._expression
            raise

    def __str__(self):
        return self._expression

    def __repr__(self):
        return (f"MathExpression({self._expression!r}, max_scale={self.max_scale}, "
                f"rounding_mode={self.rounding_mode!r})")


# -----------------------------
# Module level helpers
# -----------------------------

def calculate(problem, variables=None):
    """One-shot evaluation using the max scale / rounding mode from config.json."""
    try:
        config = config_manager.load_evaluation_config()
        expression = MathExpression(problem, config.max_scale, config.rounding_mode)
        return expression.evaluate(variables)

    # Domain errors keep their code; attach the raw input
    except E.MathError as e:
        e.equation = problem
        raise e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=E.message_for("9999", e), code="9999", equation=problem) from e


def render(value):
    """Render a Decimal result in plain notation, e.g. Decimal('1E+3') -> '= 1000'."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return "= " + format(value, "f")


def interactive_main():
    """Read one expression from stdin, print its result or the error."""
    if config_manager.load_setting_value("debug"):
        logging.basicConfig()
        logging.getLogger("mathexpr").setLevel(logging.DEBUG)

    print("Enter the problem: ")
    problem = input()
    try:
        print(render(calculate(problem)))
    except E.MathError as e:
        print(f"Error {e.code}: {e.message}")


if __name__ == "__main__":
    interactive_main()
