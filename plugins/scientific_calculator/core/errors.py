"""Exception hierarchy for the expression engine."""

from __future__ import annotations


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""

    code = "invalid_expression"


class StackUnderflow(ExpressionError):
    """An operator or function ran out of operands."""

    code = "stack_underflow"


class ExcessOperands(ExpressionError):
    """Evaluation finished with more than one value left on the stack."""

    code = "excess_operands"


class DomainError(ExpressionError):
    """A function argument lies outside the function's domain."""

    code = "domain_error"


class UnbalancedParentheses(ExpressionError):
    code = "unbalanced_parentheses"


class UnrecognizedCharacter(ExpressionError):
    code = "unrecognized_character"

    def __init__(self, character: str, position: int):
        super().__init__(f"Unrecognized character '{character}' at position {position}")
        self.character = character
        self.position = position


class UnknownFunction(ExpressionError):
    code = "unknown_function"

    def __init__(self, name: str):
        super().__init__(f"Unknown function '{name}'")
        self.name = name


class MalformedNumber(ExpressionError):
    code = "malformed_number"

    def __init__(self, literal: str):
        super().__init__(f"Malformed number '{literal}'")
        self.literal = literal


class ExpressionTooLong(ExpressionError):
    code = "expression_too_long"


class InvalidAngleMode(ExpressionError):
    code = "invalid_angle_mode"


__all__ = [
    "ExpressionError",
    "StackUnderflow",
    "ExcessOperands",
    "DomainError",
    "UnbalancedParentheses",
    "UnrecognizedCharacter",
    "UnknownFunction",
    "MalformedNumber",
    "ExpressionTooLong",
    "InvalidAngleMode",
]
