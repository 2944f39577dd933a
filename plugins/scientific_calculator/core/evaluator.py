"""Stack evaluation of postfix token sequences and the function table."""

from __future__ import annotations

import math
from typing import Callable, Iterable

from .errors import DomainError, ExcessOperands, StackUnderflow
from .tokens import AngleMode, Function, MathFunction, Number, Token


def _ieee(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Map :mod:`math` domain and range errors onto NaN and infinity."""

    def wrapped(value: float) -> float:
        try:
            return fn(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return wrapped


def _wrap_trig(fn: Callable[[float], float], *, use_degrees: bool) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        rad = math.radians(value) if use_degrees else value
        return fn(rad)

    return _ieee(wrapped)


def _wrap_inverse_trig(fn: Callable[[float], float], *, use_degrees: bool) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        angle = fn(value)
        return math.degrees(angle) if use_degrees else angle

    return _ieee(wrapped)


def _logarithm(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        if value == 0:
            return -math.inf
        return fn(value)

    return _ieee(wrapped)


def divide(a: float, b: float) -> float:
    """Floating point division with IEEE semantics for a zero divisor."""

    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def factorial(n: float) -> float:
    """Return ``n!`` as a float for non-negative integral ``n``.

    Raises :class:`DomainError` for negative or fractional input. Large
    arguments overflow to infinity.
    """

    if math.isnan(n) or math.isinf(n) or n < 0 or not float(n).is_integer():
        raise DomainError(f"Factorial is undefined for {n!r}")
    if n in (0, 1):
        return 1.0
    result = 1.0
    i = 2
    while i <= n:
        result *= i
        if math.isinf(result):
            break
        i += 1
    return result


def _make_function_table(angle_mode: AngleMode) -> dict[MathFunction, Callable[[float], float]]:
    use_degrees = angle_mode is AngleMode.DEGREES
    return {
        MathFunction.SIN: _wrap_trig(math.sin, use_degrees=use_degrees),
        MathFunction.COS: _wrap_trig(math.cos, use_degrees=use_degrees),
        MathFunction.TAN: _wrap_trig(math.tan, use_degrees=use_degrees),
        MathFunction.ASIN: _wrap_inverse_trig(math.asin, use_degrees=use_degrees),
        MathFunction.ACOS: _wrap_inverse_trig(math.acos, use_degrees=use_degrees),
        MathFunction.ATAN: _wrap_inverse_trig(math.atan, use_degrees=use_degrees),
        MathFunction.LOG: _logarithm(math.log10),
        MathFunction.LN: _logarithm(math.log),
        MathFunction.SQUARE: lambda x: x * x,
        MathFunction.CUBE: lambda x: x * x * x,
        MathFunction.SQRT: _ieee(math.sqrt),
        MathFunction.CBRT: math.cbrt,
        MathFunction.POW10: _ieee(lambda x: 10.0**x),
        MathFunction.EXP: _ieee(math.exp),
        MathFunction.FACTORIAL: factorial,
        MathFunction.RECIPROCAL: lambda x: divide(1.0, x),
        MathFunction.IDENTITY: lambda x: x,
    }


def apply_function(func: MathFunction, value: float, angle_mode: AngleMode = AngleMode.RADIANS) -> float:
    """Apply a single table function to ``value``."""

    return _make_function_table(angle_mode)[func](value)


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
}


def _pop(stack: list[float], token: Token) -> float:
    if not stack:
        raise StackUnderflow(f"Missing operand for '{token}'")
    return stack.pop()


def evaluate_postfix(
    postfix: Iterable[Token],
    angle_mode: AngleMode = AngleMode.RADIANS,
    *,
    strict: bool = True,
) -> float:
    """Evaluate Reverse Polish ``postfix`` tokens with a single value stack."""

    functions = _make_function_table(angle_mode)
    stack: list[float] = []

    for token in postfix:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Function):
            arg = _pop(stack, token)
            try:
                stack.append(functions[token.func](arg))
            except DomainError:
                if strict:
                    raise
                stack.append(math.nan)
        else:
            b = _pop(stack, token)
            a = _pop(stack, token)
            stack.append(_BINARY[token.symbol](a, b))

    if not stack:
        return 0.0
    if len(stack) > 1 and strict:
        raise ExcessOperands(f"Expression leaves {len(stack)} values; missing an operator?")
    return stack[0]


__all__ = ["apply_function", "divide", "evaluate_postfix", "factorial"]
