"""
Tests for arithmetic and comparison rules.
"""
import pytest

from swiftlet.exceptions import OperandTypeError, ScriptArithmeticError
from swiftlet.operations import INT64_MAX, INT64_MIN, Op, apply_arithmetic, compare


@pytest.mark.parametrize(
    "lhs, op, rhs, expected",
    [
        (7, Op.ADD, 2, 9),
        (7, Op.SUB, 9, -2),
        (7, Op.MUL, 3, 21),
        (7, Op.DIV, 2, 3),
        (-7, Op.DIV, 2, -3),
        (7, Op.DIV, -2, -3),
        (-7, Op.MOD, 3, 2),
        (7, Op.MOD, -3, -2),
    ],
)
def test_integer_arithmetic(lhs, op, rhs, expected):
    """Division truncates toward zero and modulo follows the divisor's sign."""
    assert apply_arithmetic(lhs, op, rhs) == expected


def test_floats_are_truncated_before_arithmetic():
    """Mixed float arithmetic always yields an integer."""
    result = apply_arithmetic(2.9, Op.ADD, 1.9)
    assert result == 3
    assert isinstance(result, int)
    assert apply_arithmetic(-2.5, Op.MUL, 2) == -4


def test_results_wrap_to_64_bits():
    """Integer results stay within the signed 64-bit range."""
    assert apply_arithmetic(INT64_MAX, Op.ADD, 1) == INT64_MIN


@pytest.mark.parametrize("op, message", [(Op.DIV, "Division by zero"), (Op.MOD, "Modulo by zero")])
def test_zero_divisor(op, message):
    """Division and modulo by zero are arithmetic errors."""
    with pytest.raises(ArithmeticError) as exc_info:
        apply_arithmetic(10, op, 0, line=2, column=4)
    assert isinstance(exc_info.value, ScriptArithmeticError)
    assert exc_info.value.message == message
    assert (exc_info.value.line, exc_info.value.column) == (2, 4)


def test_truncated_zero_divisor():
    """A float divisor that truncates to zero is still a division by zero."""
    with pytest.raises(ScriptArithmeticError):
        apply_arithmetic(1, Op.DIV, 0.5)


def test_strings_are_not_arithmetic_operands():
    """Arithmetic needs two numbers."""
    with pytest.raises(OperandTypeError):
        apply_arithmetic("a", Op.ADD, 1)


def test_float_tolerance_equality():
    """Doubles within 1e-10 of each other compare equal."""
    assert compare(0.1 + 0.2, Op.EQ, 0.3)
    assert not compare(0.1 + 0.2, Op.NE, 0.3)
    assert not compare(0.3, Op.EQ, 0.3001)


def test_integral_values_compare_as_integers():
    """Floats without a fractional part compare like integers."""
    assert compare(3.0, Op.EQ, 3)
    assert compare(4, Op.GE, 4.0)
    assert compare(2.5, Op.LT, 3)
    assert compare(2, Op.GT, 1.5)


def test_string_equality():
    """Strings can be tested for equality but not ordered."""
    assert compare("yes", Op.EQ, "yes")
    assert compare("yes", Op.NE, "no")
    with pytest.raises(OperandTypeError):
        compare("a", Op.LT, "b")
    with pytest.raises(OperandTypeError):
        compare("1", Op.EQ, 1)
