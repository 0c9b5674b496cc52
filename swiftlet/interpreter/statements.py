"""Statement execution for Swiftlet.

These functions operate on a `swiftlet.interpreter.Interpreter` instance and
execute the statement forms of the language directly from the token list:
declarations, assignments, ``print``, ``while`` loops and ``if``/``else``.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TYPE_CHECKING

from swiftlet.exceptions import (
    LoopLimitExceeded,
    UnclosedBlockError,
    UndefinedVariableError,
    UnhandledKeywordError,
)
from swiftlet.lexer import TokenKind

if TYPE_CHECKING:
    from swiftlet.interpreter import Interpreter

logger = logging.getLogger(__name__)


def execute_statement(interp: 'Interpreter') -> None:
    """
    Execute a single statement.

    Syntax:
        var <identifier> = <expression>
        let <identifier> = <expression>
        <identifier> = <expression>
        print(<expression>)
        while <condition> { <statement>* }
        if <condition> { <statement>* } [else { <statement>* }]

    Any other token in statement position, such as a ``;`` separator or a
    stray literal, is skipped.

    Args:
        interp: The interpreter instance.

    Raises:
        UnhandledKeywordError: If a keyword cannot start a statement.
    """
    tok = interp.curr_token
    if tok.kind == TokenKind.KEYWORD:
        if tok.text in ('var', 'let'):
            exec_declaration(interp)
        elif tok.text == 'print':
            exec_print(interp)
        elif tok.text == 'while':
            exec_while(interp)
        elif tok.text == 'if':
            exec_if(interp)
        else:
            raise UnhandledKeywordError(tok.text, tok.line, tok.column)
    elif tok.kind == TokenKind.IDENTIFIER:
        exec_assignment(interp)
    else:
        logger.debug("Skipping %s on line %d", tok.describe(), tok.line)
        interp.advance()


def execute_block(interp: 'Interpreter') -> None:
    """
    Execute statements until the closing ``}`` of the current block.

    The brace is left under the cursor for the caller.

    Raises:
        UnclosedBlockError: If the tokens run out first.
    """
    while not interp.curr_token.matches(TokenKind.PUNCTUATION, '}'):
        if interp.at_end():
            tok = interp.curr_token
            raise UnclosedBlockError(tok.line, tok.column)
        interp.statement()


def skip_block(interp: 'Interpreter') -> None:
    """
    Skip the tokens of a block whose ``{`` was already consumed.

    Nested braces are balanced; the cursor ends just past the matching ``}``.

    Raises:
        UnclosedBlockError: If the tokens run out first.
    """
    depth = 1
    while depth > 0:
        tok = interp.curr_token
        if tok.kind == TokenKind.EOF:
            raise UnclosedBlockError(tok.line, tok.column)
        if tok.matches(TokenKind.PUNCTUATION, '{'):
            depth += 1
        elif tok.matches(TokenKind.PUNCTUATION, '}'):
            depth -= 1
        interp.advance()


def run_scoped_block(interp: 'Interpreter') -> None:
    """
    Execute a block in a fresh frame and consume its closing ``}``.
    """
    interp.scopes.push()
    try:
        interp.execute_block()
        interp.expect(TokenKind.PUNCTUATION, '}')
    finally:
        interp.scopes.pop()


def exec_declaration(interp: 'Interpreter') -> None:
    """
    Declare a variable in the current frame. ``var`` and ``let`` behave the same.

    Syntax:
        var <identifier> = <expression>

    Raises:
        RedeclarationError: If the name is already declared.
    """
    interp.advance()
    name_tok = interp.expect(TokenKind.IDENTIFIER)
    interp.expect(TokenKind.OPERATOR, '=')
    value = interp.expression()
    interp.scopes.declare(name_tok.text, value, name_tok.line, name_tok.column)


def exec_assignment(interp: 'Interpreter') -> None:
    """
    Assign a new value to an existing variable.

    Syntax:
        <identifier> = <expression>

    Raises:
        UndefinedVariableError: If the variable was never declared.
    """
    name_tok = interp.curr_token
    if not interp.scopes.exists(name_tok.text):
        raise UndefinedVariableError(name_tok.text, name_tok.line, name_tok.column)
    interp.advance()
    interp.expect(TokenKind.OPERATOR, '=')
    value = interp.expression()
    interp.scopes.update(name_tok.text, value)


def exec_print(interp: 'Interpreter') -> None:
    """
    Write the value of an expression to the session's output.

    Syntax:
        print(<expression>)
    """
    interp.advance()
    interp.expect(TokenKind.PUNCTUATION, '(')
    value = interp.expression()
    interp.expect(TokenKind.PUNCTUATION, ')')
    interp.session.emit(value)


def exec_while(interp: 'Interpreter') -> None:
    """
    Run a loop by rewinding the cursor to its condition and body.

    Syntax:
        while <condition> { <statement>* }

    Each iteration runs in a fresh frame. When the condition turns false the
    cursor is moved past the body's closing brace.

    Raises:
        LoopLimitExceeded: If the loop runs more than the iteration cap.
    """
    while_tok = interp.advance()
    condition_start = interp.position
    condition = interp.condition()
    interp.expect(TokenKind.PUNCTUATION, '{')
    body_start = interp.position

    iterations = 0
    while condition:
        iterations += 1
        if iterations > interp.max_iterations:
            raise LoopLimitExceeded(interp.max_iterations, while_tok.line, while_tok.column)

        interp.scopes.push()
        try:
            interp.position = body_start
            interp.execute_block()
        finally:
            interp.scopes.pop()

        interp.position = condition_start
        condition = interp.condition()

    logger.debug(
        "Loop on line %d finished after %d iterations", while_tok.line, iterations
    )
    interp.position = body_start
    interp.skip_block()


def exec_if(interp: 'Interpreter') -> None:
    """
    Run one of the branches of a conditional and skip the other.

    Syntax:
        if <condition> { <statement>* } [else { <statement>* }]
    """
    if_tok = interp.advance()
    condition = interp.condition()
    interp.expect(TokenKind.PUNCTUATION, '{')
    logger.debug("Condition on line %d is %s", if_tok.line, condition)

    if condition:
        run_scoped_block(interp)
        if interp.curr_token.matches(TokenKind.KEYWORD, 'else'):
            interp.advance()
            interp.expect(TokenKind.PUNCTUATION, '{')
            interp.skip_block()
    else:
        interp.skip_block()
        if interp.curr_token.matches(TokenKind.KEYWORD, 'else'):
            interp.advance()
            interp.expect(TokenKind.PUNCTUATION, '{')
            run_scoped_block(interp)
