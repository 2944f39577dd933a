import pytest

from plugins.scientific_calculator.core import UnbalancedParentheses, to_postfix, tokenize


def _rpn(expression: str, *, strict: bool = True) -> list[str]:
    return [str(token) for token in to_postfix(tokenize(expression, strict=strict), strict=strict)]


def test_precedence():
    assert _rpn("2 + 3 * 4") == ["2.0", "3.0", "4.0", "*", "+"]


def test_parentheses_override_precedence():
    assert _rpn("(2 + 3) * 4") == ["2.0", "3.0", "+", "4.0", "*"]


def test_left_associativity():
    assert _rpn("8 - 3 - 2") == ["8.0", "3.0", "-", "2.0", "-"]
    assert _rpn("8 / 4 * 2") == ["8.0", "4.0", "/", "2.0", "*"]


def test_function_binds_to_its_group():
    assert _rpn("sin(30) + 1") == ["30.0", "sin", "1.0", "+"]
    assert _rpn("√(x²(3) + 16)") == ["3.0", "x²", "16.0", "+", "√"]


def test_unmatched_open_parenthesis():
    with pytest.raises(UnbalancedParentheses):
        _rpn("(2 + 3")
    assert _rpn("(2 + 3", strict=False) == ["2.0", "3.0", "+"]


def test_unmatched_close_parenthesis():
    with pytest.raises(UnbalancedParentheses):
        _rpn("2 + 3)")
    assert _rpn("2 + 3)", strict=False) == ["2.0", "3.0", "+"]
