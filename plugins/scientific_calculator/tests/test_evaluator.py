import math

import pytest

from plugins.scientific_calculator.core import (
    AngleMode,
    DomainError,
    ExcessOperands,
    Function,
    MathFunction,
    Number,
    Operator,
    StackUnderflow,
    apply_function,
    evaluate_postfix,
    factorial,
)


def test_operands_pop_in_order():
    assert evaluate_postfix([Number(10.0), Number(4.0), Operator("-")]) == 6.0
    assert evaluate_postfix([Number(1.0), Number(4.0), Operator("/")]) == 0.25


def test_division_by_zero_follows_ieee():
    assert evaluate_postfix([Number(1.0), Number(0.0), Operator("/")]) == math.inf
    assert evaluate_postfix([Number(-1.0), Number(0.0), Operator("/")]) == -math.inf
    assert math.isnan(evaluate_postfix([Number(0.0), Number(0.0), Operator("/")]))


def test_empty_postfix_is_zero():
    assert evaluate_postfix([]) == 0.0


@pytest.mark.parametrize(
    "postfix",
    [
        [Operator("+")],
        [Number(1.0), Operator("*")],
        [Function(MathFunction.SIN, "sin")],
    ],
)
def test_stack_underflow(postfix):
    with pytest.raises(StackUnderflow):
        evaluate_postfix(postfix)


def test_excess_operands():
    with pytest.raises(ExcessOperands):
        evaluate_postfix([Number(1.0), Number(2.0)])
    assert evaluate_postfix([Number(1.0), Number(2.0)], strict=False) == 1.0


@pytest.mark.parametrize(
    "func, arg, expected",
    [
        (MathFunction.SQUARE, 3.0, 9.0),
        (MathFunction.CUBE, 2.0, 8.0),
        (MathFunction.SQRT, 16.0, 4.0),
        (MathFunction.CBRT, -27.0, -3.0),
        (MathFunction.POW10, 2.0, 100.0),
        (MathFunction.EXP, 0.0, 1.0),
        (MathFunction.LOG, 1000.0, 3.0),
        (MathFunction.LN, math.e, 1.0),
        (MathFunction.RECIPROCAL, 4.0, 0.25),
        (MathFunction.IDENTITY, 7.5, 7.5),
    ],
)
def test_function_table(func, arg, expected):
    assert apply_function(func, arg) == pytest.approx(expected)


@pytest.mark.parametrize(
    "func, arg, mode, expected",
    [
        (MathFunction.SIN, 90.0, AngleMode.DEGREES, 1.0),
        (MathFunction.COS, 60.0, AngleMode.DEGREES, 0.5),
        (MathFunction.TAN, 45.0, AngleMode.DEGREES, 1.0),
        (MathFunction.COS, 0.0, AngleMode.RADIANS, 1.0),
        (MathFunction.ASIN, 1.0, AngleMode.DEGREES, 90.0),
        (MathFunction.ACOS, 0.5, AngleMode.DEGREES, 60.0),
        (MathFunction.ATAN, 1.0, AngleMode.RADIANS, math.pi / 4),
    ],
)
def test_trigonometry_respects_angle_mode(func, arg, mode, expected):
    assert apply_function(func, arg, mode) == pytest.approx(expected)


def test_out_of_domain_math_yields_nan_or_infinity():
    assert math.isnan(apply_function(MathFunction.LOG, -1.0))
    assert math.isnan(apply_function(MathFunction.SQRT, -1.0))
    assert math.isnan(apply_function(MathFunction.ASIN, 2.0))
    assert apply_function(MathFunction.LN, 0.0) == -math.inf
    assert apply_function(MathFunction.EXP, 1000.0) == math.inf
    assert apply_function(MathFunction.POW10, 400.0) == math.inf
    assert apply_function(MathFunction.RECIPROCAL, 0.0) == math.inf
    assert apply_function(MathFunction.RECIPROCAL, -0.0) == -math.inf


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120
    assert math.isfinite(factorial(170))
    assert factorial(171) == math.inf


@pytest.mark.parametrize("value", [-1.0, 3.5, math.nan, math.inf])
def test_factorial_domain(value):
    with pytest.raises(DomainError):
        factorial(value)


def test_factorial_domain_is_nan_when_lenient():
    postfix = [Number(3.5), Function(MathFunction.FACTORIAL, "n!")]
    with pytest.raises(DomainError):
        evaluate_postfix(postfix)
    assert math.isnan(evaluate_postfix(postfix, strict=False))
