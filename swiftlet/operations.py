"""Operators and the numeric model.

Arithmetic truncates both operands to integers before computing and keeps
results inside the signed 64-bit range. Comparisons are made between integers
when both sides are integral, otherwise between doubles with a small tolerance
for equality.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from enum import Enum

from swiftlet.exceptions import OperandTypeError, ScriptArithmeticError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

FLOAT_TOLERANCE = 1e-10


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Plain strings: Enum members hash by name, not by value
ARITHMETIC_OPS = frozenset(op.value for op in (Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.MOD))
COMPARISON_OPS = frozenset(op.value for op in (Op.EQ, Op.NE, Op.GT, Op.LT, Op.GE, Op.LE))


def is_comparison(text: str) -> bool:
    """
    Return True if ``text`` is a comparison operator.
    """
    return text in COMPARISON_OPS


def is_numeric(value) -> bool:
    """
    Return True for integer and float values.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def wrap_int64(value: int) -> int:
    """
    Wrap an integer into the signed 64-bit range (two's complement).
    """
    return ((value - INT64_MIN) % (1 << 64)) + INT64_MIN


def _truncate(value, op: Op, line, column) -> int:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ScriptArithmeticError(
                f"Cannot apply '{op}' to non-finite value {value}", line, column
            )
        return wrap_int64(int(value))
    return value


def apply_arithmetic(lhs, op: Op, rhs, line=None, column=None) -> int:
    """
    Apply an arithmetic operator to two numeric operands.

    Both operands are truncated toward zero before computing, so the result
    is always an integer. ``/`` truncates toward zero and ``%`` takes the sign
    of the divisor.

    Raises:
        OperandTypeError: If either operand is not numeric.
        ScriptArithmeticError: On division or modulo by zero.
    """
    if not is_numeric(lhs) or not is_numeric(rhs):
        raise OperandTypeError(
            f"Invalid operands for operator {op}: "
            f"{type(lhs).__name__} and {type(rhs).__name__}",
            line,
            column,
        )
    left = _truncate(lhs, op, line, column)
    right = _truncate(rhs, op, line, column)

    match op:
        case Op.ADD:
            result = left + right
        case Op.SUB:
            result = left - right
        case Op.MUL:
            result = left * right
        case Op.DIV:
            if right == 0:
                raise ScriptArithmeticError("Division by zero", line, column)
            result = abs(left) // abs(right)
            if (left < 0) != (right < 0):
                result = -result
        case Op.MOD:
            if right == 0:
                raise ScriptArithmeticError("Modulo by zero", line, column)
            result = left % right
        case _:
            raise ValueError(f"Not an arithmetic operator: {op}")
    return wrap_int64(result)


def _is_integral(value) -> bool:
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def compare(lhs, op: Op, rhs, line=None, column=None) -> bool:
    """
    Compare two values with a comparison operator.

    Integral values (integers, or floats with no fractional part) compare as
    integers. Anything else compares as doubles, with ``==`` and ``!=`` using an
    absolute tolerance of ``1e-10``. Two strings may only be tested for
    equality.

    Raises:
        OperandTypeError: If the operands cannot be compared with ``op``.
    """
    if isinstance(lhs, str) and isinstance(rhs, str) and op in (Op.EQ, Op.NE):
        return (lhs == rhs) == (op == Op.EQ)
    if not is_numeric(lhs) or not is_numeric(rhs):
        raise OperandTypeError(
            f"Cannot compare {type(lhs).__name__} and {type(rhs).__name__} with '{op}'",
            line,
            column,
        )

    if _is_integral(lhs) and _is_integral(rhs):
        left, right = int(lhs), int(rhs)
        equal = left == right
    else:
        left, right = float(lhs), float(rhs)
        equal = abs(left - right) < FLOAT_TOLERANCE

    match op:
        case Op.EQ:
            return equal
        case Op.NE:
            return not equal
        case Op.LT:
            return left < right
        case Op.GT:
            return left > right
        case Op.LE:
            return left <= right
        case Op.GE:
            return left >= right
        case _:
            raise ValueError(f"Not a comparison operator: {op}")


__all__ = [
    "Op",
    "ARITHMETIC_OPS",
    "COMPARISON_OPS",
    "apply_arithmetic",
    "compare",
    "is_comparison",
    "wrap_int64",
]
