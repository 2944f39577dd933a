"""Convert raw expression text into typed tokens."""

from __future__ import annotations

import math

from .errors import MalformedNumber, UnknownFunction, UnrecognizedCharacter
from .tokens import FUNCTION_NAMES, Function, MathFunction, Number, Operator, Token

_OPERATOR_CHARS = "+-*/()"
_SIGN_CHARS = "+-"
_DIGITS = frozenset("0123456789")
# Longest spelling first so "asin" wins over "sin" and "x^2" over "x".
_FUNCTION_SPELLINGS = sorted(FUNCTION_NAMES, key=len, reverse=True)


def _is_number_char(char: str) -> bool:
    return char in _DIGITS or char == "."


def _is_name_char(char: str) -> bool:
    return char.isalpha() or char == "^"


def _opens_call(expression: str, index: int) -> bool:
    while index < len(expression) and expression[index].isspace():
        index += 1
    return index < len(expression) and expression[index] == "("


def _match_function(expression: str, index: int) -> str | None:
    for spelling in _FUNCTION_SPELLINGS:
        if expression.startswith(spelling, index) and _opens_call(expression, index + len(spelling)):
            return spelling
    return None


def _in_prefix_position(tokens: list[Token]) -> bool:
    if not tokens:
        return True
    last = tokens[-1]
    return isinstance(last, Operator) and last.symbol != ")"


def _parse_number(literal: str, *, strict: bool) -> float:
    if literal.count(".") > 1 or literal.strip("+-") == ".":
        if strict:
            raise MalformedNumber(literal)
        first = literal.find(".")
        second = literal.find(".", first + 1)
        literal = literal if second == -1 else literal[:second]
        if literal.strip("+-") == ".":
            return math.nan
    return float(literal)


def tokenize(expression: str, *, strict: bool = True) -> list[Token]:
    """Split ``expression`` into numbers, operators and function calls.

    Function names must be immediately followed by ``(``; this is what lets
    symbolic names such as ``10^x`` or ``1/x`` coexist with numeric literals
    and operators. A ``+`` or ``-`` in prefix position directly in front of a
    number is folded into that number.

    In strict mode unknown names, unknown characters and literals with more
    than one decimal point raise :class:`ExpressionError` subclasses. With
    ``strict=False`` the legacy recovery applies: unknown characters are
    skipped, unknown names become identity functions and malformed literals
    keep their longest valid prefix.
    """

    tokens: list[Token] = []
    index = 0
    length = len(expression)

    while index < length:
        char = expression[index]

        if char.isspace():
            index += 1
            continue

        spelling = _match_function(expression, index)
        if spelling is not None:
            tokens.append(Function(FUNCTION_NAMES[spelling], spelling))
            index += len(spelling)
            continue

        signed = (
            char in _SIGN_CHARS
            and index + 1 < length
            and _is_number_char(expression[index + 1])
            and _in_prefix_position(tokens)
        )
        if _is_number_char(char) or signed:
            start = index
            index += 1
            while index < length and _is_number_char(expression[index]):
                index += 1
            tokens.append(Number(_parse_number(expression[start:index], strict=strict)))
            continue

        if char in _OPERATOR_CHARS:
            tokens.append(Operator(char))
            index += 1
            continue

        if char.isalpha():
            start = index
            while index < length and _is_name_char(expression[index]):
                index += 1
            name = expression[start:index]
            func = FUNCTION_NAMES.get(name)
            if func is None:
                if strict:
                    raise UnknownFunction(name)
                func = MathFunction.IDENTITY
            tokens.append(Function(func, name))
            continue

        if strict:
            raise UnrecognizedCharacter(char, index)
        index += 1

    return tokens


__all__ = ["tokenize"]
