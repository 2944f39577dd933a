"""Exports for scientific calculator core."""

from .engine import (
    MAX_EXPR_LENGTH,
    apply_sign_toggle,
    chain,
    compile_expression,
    evaluate,
    evaluate_expression,
    format_result,
    substitute_constants,
)
from .errors import (
    DomainError,
    ExcessOperands,
    ExpressionError,
    ExpressionTooLong,
    InvalidAngleMode,
    MalformedNumber,
    StackUnderflow,
    UnbalancedParentheses,
    UnknownFunction,
    UnrecognizedCharacter,
)
from .evaluator import apply_function, evaluate_postfix, factorial
from .history import DEFAULT_HISTORY_SIZE, CalculationHistory, HistoryEntry
from .memory import CalculatorMemory
from .parser import to_postfix
from .tokenizer import tokenize
from .tokens import FUNCTION_NAMES, AngleMode, Function, MathFunction, Number, Operator, Token, describe_token


def list_functions() -> list[dict[str, object]]:
    """Return the supported functions with every accepted spelling."""

    spellings: dict[MathFunction, list[str]] = {}
    for name, func in FUNCTION_NAMES.items():
        spellings.setdefault(func, []).append(name)
    return [
        {
            "symbol": func.symbol,
            "names": spellings[func],
            "angle_dependent": func
            in {
                MathFunction.SIN,
                MathFunction.COS,
                MathFunction.TAN,
                MathFunction.ASIN,
                MathFunction.ACOS,
                MathFunction.ATAN,
            },
        }
        for func in MathFunction
        if func is not MathFunction.IDENTITY
    ]


__all__ = [
    "MAX_EXPR_LENGTH",
    "DEFAULT_HISTORY_SIZE",
    "AngleMode",
    "CalculationHistory",
    "CalculatorMemory",
    "DomainError",
    "ExcessOperands",
    "ExpressionError",
    "ExpressionTooLong",
    "Function",
    "HistoryEntry",
    "InvalidAngleMode",
    "MalformedNumber",
    "MathFunction",
    "Number",
    "Operator",
    "StackUnderflow",
    "Token",
    "UnbalancedParentheses",
    "UnknownFunction",
    "UnrecognizedCharacter",
    "apply_function",
    "apply_sign_toggle",
    "chain",
    "compile_expression",
    "describe_token",
    "evaluate",
    "evaluate_expression",
    "evaluate_postfix",
    "factorial",
    "format_result",
    "list_functions",
    "substitute_constants",
    "to_postfix",
    "tokenize",
]
