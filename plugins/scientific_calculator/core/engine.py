"""Public evaluation entry points for the Scientific Calculator plugin."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from .errors import DomainError, ExpressionError, ExpressionTooLong
from .evaluator import evaluate_postfix
from .parser import to_postfix
from .tokenizer import tokenize
from .tokens import AngleMode, Token

MAX_EXPR_LENGTH = 1024

# Constants adjacent to a digit or a decimal point are not substituted.
_PI_PATTERN = re.compile(r"(?<![0-9.])π(?![0-9.])|(?<![A-Za-z0-9.])pi(?![A-Za-z0-9.])")
_E_PATTERN = re.compile(r"(?<![A-Za-z0-9.^])e(?![A-Za-z0-9.^])")
_TRAILING_LITERAL = re.compile(r"([0-9]*\.?[0-9]+)$")


def _check_length(expression: str, max_length: int) -> None:
    if not isinstance(expression, str):
        raise ExpressionError("Expression must be a string")
    if len(expression) > max_length:
        raise ExpressionTooLong(f"Expression is longer than {max_length} characters")


def compile_expression(
    expression: str,
    *,
    strict: bool = True,
    max_length: int = MAX_EXPR_LENGTH,
) -> list[Token]:
    """Tokenize ``expression`` and return its postfix form."""

    _check_length(expression, max_length)
    return to_postfix(tokenize(expression, strict=strict), strict=strict)


def evaluate(
    expression: str,
    angle_mode: AngleMode | str = AngleMode.RADIANS,
    *,
    strict: bool = True,
    max_length: int = MAX_EXPR_LENGTH,
) -> float:
    """Evaluate ``expression`` and return a float.

    An expression with no tokens evaluates to ``0.0``. Division by zero and
    overflow follow IEEE rules and produce infinities or NaN instead of
    raising. Structural problems raise :class:`ExpressionError` subclasses
    whose ``code`` identifies the failure.
    """

    mode = AngleMode.parse(angle_mode)
    _check_length(expression, max_length)
    tokens = tokenize(expression, strict=strict)
    if not tokens:
        return 0.0
    return evaluate_postfix(to_postfix(tokens, strict=strict), mode, strict=strict)


def format_result(value: float) -> str:
    """Render ``value`` as text the tokenizer reads back to the same float.

    Positional notation is used throughout since the tokenizer has no
    exponent syntax.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def chain(
    previous: float,
    continuation: str,
    angle_mode: AngleMode | str = AngleMode.RADIANS,
    *,
    strict: bool = True,
    max_length: int = MAX_EXPR_LENGTH,
) -> float:
    """Continue a calculation from ``previous``, e.g. ``chain(14, " * 2")``."""

    if math.isnan(previous) or math.isinf(previous):
        raise DomainError("Cannot continue from a non-finite result")
    return evaluate(
        format_result(previous) + continuation,
        angle_mode,
        strict=strict,
        max_length=max_length,
    )


def substitute_constants(expression: str) -> str:
    """Replace ``π``/``pi`` and a standalone ``e`` with decimal values."""

    expression = _PI_PATTERN.sub(repr(math.pi), expression)
    return _E_PATTERN.sub(repr(math.e), expression)


def apply_sign_toggle(expression: str) -> str:
    """Negate the trailing numeric literal of ``expression``.

    A literal already carrying a prefix ``-`` loses it; an expression that
    does not end in a literal is returned unchanged.
    """

    match = _TRAILING_LITERAL.search(expression)
    if match is None:
        return expression
    start = match.start(1)
    head = expression[:start]
    literal = match.group(1)
    if head.endswith(("-", "+")):
        before = head[:-1].rstrip()
        if not before or before[-1] in "+-*/(":
            sign = head[-1]
            return head[:-1] + ("" if sign == "-" else "-") + literal
    return head + "-" + literal


def evaluate_expression(
    expression: str,
    *,
    angle_mode: AngleMode | str = AngleMode.RADIANS,
    strict: bool = True,
    max_length: int = MAX_EXPR_LENGTH,
) -> dict[str, object]:
    """Evaluate an expression and return a JSON friendly payload."""

    mode = AngleMode.parse(angle_mode)
    postfix = compile_expression(expression, strict=strict, max_length=max_length)
    result = evaluate_postfix(postfix, mode, strict=strict)
    finite = math.isfinite(result)
    return {
        "expression": expression,
        "result": result if finite else None,
        "finite": finite,
        "display": format_result(result),
        "postfix": [str(token) for token in postfix],
        "angle_mode": mode.value,
    }


__all__ = [
    "MAX_EXPR_LENGTH",
    "apply_sign_toggle",
    "chain",
    "compile_expression",
    "evaluate",
    "evaluate_expression",
    "format_result",
    "substitute_constants",
]
