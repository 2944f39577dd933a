"""Shunting-yard conversion from infix tokens to postfix order."""

from __future__ import annotations

from typing import Iterable

from .errors import UnbalancedParentheses
from .tokens import PRECEDENCE, Function, Number, Operator, Token


def _is_open_paren(token: Token) -> bool:
    return isinstance(token, Operator) and token.symbol == "("


def to_postfix(tokens: Iterable[Token], *, strict: bool = True) -> list[Token]:
    """Reorder ``tokens`` into Reverse Polish notation.

    Functions are held on the operator stack until the parenthesised group
    that follows them closes. All four binary operators are left
    associative. With ``strict=False`` unmatched parentheses are tolerated
    the way the legacy calculator tolerated them: a stray ``(`` is dropped at
    the end and a stray ``)`` just drains the stack.
    """

    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Function) or _is_open_paren(token):
            stack.append(token)
        elif token.symbol == ")":
            while stack and not _is_open_paren(stack[-1]):
                output.append(stack.pop())
            if stack:
                stack.pop()
            elif strict:
                raise UnbalancedParentheses("Unmatched ')'")
            if stack and isinstance(stack[-1], Function):
                output.append(stack.pop())
        else:
            precedence = PRECEDENCE[token.symbol]
            while (
                stack
                and isinstance(stack[-1], Operator)
                and stack[-1].symbol in PRECEDENCE
                and PRECEDENCE[stack[-1].symbol] >= precedence
            ):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        token = stack.pop()
        if _is_open_paren(token):
            if strict:
                raise UnbalancedParentheses("Unmatched '('")
            continue
        output.append(token)

    return output


__all__ = ["to_postfix"]
