"""
Expression evaluation for Swiftlet.

These functions operate on a `swiftlet.interpreter.Interpreter` instance.
There is no operator precedence: an expression is a term followed by any
number of ``<operator> <term>`` pairs, applied left to right as they are read.
A comparison operator ends the expression and is handled by
`evaluate_condition`.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from swiftlet.exceptions import (
    ScriptArithmeticError,
    UndefinedVariableError,
    UnexpectedTokenError,
)
from swiftlet.lexer import TokenKind
from swiftlet.operations import (
    ARITHMETIC_OPS,
    INT64_MAX,
    INT64_MIN,
    Op,
    apply_arithmetic,
    compare,
    is_comparison,
)

if TYPE_CHECKING:
    from swiftlet.interpreter import Interpreter


def _parse_integer(text: str, line: int, column: int):
    # An exponent makes the literal a float even without a decimal point
    if 'e' in text or 'E' in text:
        return float(text)
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ScriptArithmeticError(f"Integer literal out of range: {text}", line, column)
    return value


def evaluate_term(interp: 'Interpreter'):
    """
    Evaluate a term: an integer, float or string literal, or a variable.

    Args:
        interp: The interpreter instance.

    Returns:
        int | float | str: The value of the term.

    Raises:
        UndefinedVariableError: If a variable is not declared.
        UnexpectedTokenError: If the token cannot start a term.
    """
    tok = interp.curr_token
    if tok.kind == TokenKind.INTEGER:
        interp.advance()
        return _parse_integer(tok.text, tok.line, tok.column)
    if tok.kind == TokenKind.FLOAT:
        interp.advance()
        return float(tok.text)
    if tok.kind == TokenKind.STRING:
        interp.advance()
        return tok.text
    if tok.kind == TokenKind.IDENTIFIER:
        interp.advance()
        try:
            return interp.scopes.lookup(tok.text)
        except KeyError:
            raise UndefinedVariableError(tok.text, tok.line, tok.column) from None
    raise UnexpectedTokenError(
        f"Expected a value but found {tok.describe()}", tok.line, tok.column
    )


def evaluate_expression(interp: 'Interpreter'):
    """
    Evaluate terms joined by arithmetic operators, strictly left to right.

    Syntax:
        <term> (<op> <term>)*

    Raises:
        UnexpectedTokenError: If an operator other than ``+ - * / %`` or a
            comparison follows a term.
    """
    result = interp.term()
    while (
        interp.curr_token.kind == TokenKind.OPERATOR
        and not is_comparison(interp.curr_token.text)
    ):
        op_tok = interp.advance()
        if op_tok.text not in ARITHMETIC_OPS:
            raise UnexpectedTokenError(
                f"Unknown operator: {op_tok.text}", op_tok.line, op_tok.column
            )
        rhs = interp.term()
        result = apply_arithmetic(result, Op(op_tok.text), rhs, op_tok.line, op_tok.column)
    return result


def evaluate_condition(interp: 'Interpreter') -> bool:
    """
    Evaluate a condition for ``while`` and ``if``.

    Syntax:
        <expression> <comparison> <expression>

    Raises:
        UnexpectedTokenError: If no comparison operator follows the first expression.
    """
    lhs = interp.expression()
    op_tok = interp.curr_token
    if op_tok.kind != TokenKind.OPERATOR or not is_comparison(op_tok.text):
        raise UnexpectedTokenError(
            f"Expected comparison operator but found {op_tok.describe()}",
            op_tok.line,
            op_tok.column,
        )
    interp.advance()
    rhs = interp.expression()
    return compare(lhs, Op(op_tok.text), rhs, op_tok.line, op_tok.column)
