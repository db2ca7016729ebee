"""""
Arithmetic expression evaluator with exact Decimal results.

    >>> from mathexpr import MathExpression
    >>> MathExpression("(2+3)*4").evaluate()
    Decimal('20')
"""""
from .error import (
    MathError,
    InvalidExpressionError,
    DivisionByZeroError,
    NaNResultError,
    InfiniteNumberError,
    InvalidConfigurationError,
)
from .config_manager import EvaluationConfig, ROUNDING_MODES, DEFAULT_MAX_SCALE, DEFAULT_ROUNDING_MODE
from .Normalizer import normalize
from .Tokenizer import tokenize
from .PostfixConverter import to_postfix
from .StackEvaluator import evaluate
from .ExpressionEngine import MathExpression, calculate, render

__all__ = [
    "MathError",
    "InvalidExpressionError",
    "DivisionByZeroError",
    "NaNResultError",
    "InfiniteNumberError",
    "InvalidConfigurationError",
    "EvaluationConfig",
    "ROUNDING_MODES",
    "DEFAULT_MAX_SCALE",
    "DEFAULT_ROUNDING_MODE",
    "normalize",
    "tokenize",
    "to_postfix",
    "evaluate",
    "MathExpression",
    "calculate",
    "render",
]
