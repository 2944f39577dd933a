"""Token and enumeration types shared by the tokenizer, parser and evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidAngleMode


class AngleMode(str, Enum):
    """Unit used for trigonometric arguments and inverse-trig results."""

    DEGREES = "degree"
    RADIANS = "radian"

    @classmethod
    def parse(cls, value: "AngleMode | str") -> "AngleMode":
        if isinstance(value, AngleMode):
            return value
        normalized = str(value).strip().lower()
        aliases = {"deg": cls.DEGREES, "degrees": cls.DEGREES, "rad": cls.RADIANS, "radians": cls.RADIANS}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError as exc:
            raise InvalidAngleMode("angle_mode must be 'degree' or 'radian'") from exc


class MathFunction(str, Enum):
    """Closed set of single-argument functions understood by the evaluator."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LOG = "log"
    LN = "ln"
    SQUARE = "x²"
    CUBE = "x³"
    SQRT = "√"
    CBRT = "∛"
    POW10 = "10^x"
    EXP = "e^x"
    FACTORIAL = "n!"
    RECIPROCAL = "1/x"
    IDENTITY = "identity"

    @property
    def symbol(self) -> str:
        return self.value


# Keys are the spellings accepted in expressions.
FUNCTION_NAMES: dict[str, MathFunction] = {
    func.value: func for func in MathFunction if func is not MathFunction.IDENTITY
}
FUNCTION_NAMES.update(
    {
        "sqrt": MathFunction.SQRT,
        "cbrt": MathFunction.CBRT,
        "exp": MathFunction.EXP,
        "fact": MathFunction.FACTORIAL,
        "x^2": MathFunction.SQUARE,
        "x^3": MathFunction.CUBE,
    }
)


@dataclass(frozen=True, slots=True)
class Number:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class Operator:
    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Function:
    func: MathFunction
    name: str

    def __str__(self) -> str:
        return self.name


Token = Union[Number, Operator, Function]

BINARY_OPERATORS = frozenset("+-*/")
PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def describe_token(token: Token) -> dict[str, object]:
    """Return a JSON friendly description of ``token``."""

    if isinstance(token, Number):
        return {"type": "number", "value": token.value}
    if isinstance(token, Operator):
        return {"type": "operator", "value": token.symbol}
    return {"type": "function", "value": token.name, "function": token.func.value}


__all__ = [
    "AngleMode",
    "MathFunction",
    "FUNCTION_NAMES",
    "Number",
    "Operator",
    "Function",
    "Token",
    "BINARY_OPERATORS",
    "PRECEDENCE",
    "describe_token",
]
