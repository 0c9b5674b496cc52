"""Interpreter.

This is a token-walk interpreter: there is no parse tree. Statements and
expressions are executed straight from the token list produced by the lexer,
through a cursor that the interpreter moves forward as it consumes tokens.

1. Execution Model
`execute()` dispatches on the token under the cursor until it reaches EOF.
Keywords select a statement handler, an identifier starts an assignment. The
statement routines live in `swiftlet.interpreter.statements` and the
expression routines in `swiftlet.interpreter.expressions`.

2. Control Flow
Loops remember the token index of their condition and of their body and
rewind the cursor to re-run them. Blocks that must not run are skipped by
counting braces.

3. Scopes
Variables live in a `ScopeStack` owned by the session. Every block entry
pushes a frame that is popped again on every exit path.

4. Error Handling
Errors are raised as typed `SwiftletError`s carrying line and column. They are
caught once, in `execute()`, reported to the session's error channel and the
scope stack is unwound to the global frame. Globals bound before the failure
remain bound.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from swiftlet.exceptions import NestingTooDeepError, SwiftletError, UnexpectedTokenError
from swiftlet.lexer import Token, TokenKind
from swiftlet.session import Session

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Interpreter:
    """Token-walk interpreter for Swiftlet."""

    def __init__(
        self,
        tokens: list[Token],
        session: Session | None = None,
        file: str = "<stdin>",
        max_iterations: int | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            tokens (list): Tokens produced by `swiftlet.lexer.tokenize`.
            session (Session): Holds the global frame and the output and
                error channels. A fresh session is created when omitted.
            file (str): The name of the script, used in error messages.
            max_iterations (int): Overrides the session's loop iteration cap.
        """
        self.tokens = tokens
        self.position = 0
        self.session = session if session is not None else Session()
        self.scopes = self.session.scopes
        self.file = file
        self.max_iterations = (
            max_iterations if max_iterations is not None else self.session.max_iterations
        )

    def replace_tokens(self, tokens: list[Token]) -> None:
        """
        Load a new token list and rewind the cursor, keeping global bindings.
        """
        self.tokens = tokens
        self.position = 0

    @property
    def curr_token(self) -> Token:
        """The token under the cursor (EOF once the tokens run out)."""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        if self.tokens:
            last = self.tokens[-1]
            return Token(TokenKind.EOF, '', last.line, last.column)
        return Token(TokenKind.EOF, '', 1, 1)

    def at_end(self) -> bool:
        """Return True when the cursor is on EOF."""
        return self.curr_token.kind == TokenKind.EOF

    def advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.curr_token
        if self.position < len(self.tokens):
            self.position += 1
        return token

    def expect(self, kind: TokenKind, text: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected kind and text.

        Raises:
            UnexpectedTokenError: If the token does not match.
        """
        token = self.curr_token
        if not token.matches(kind, text):
            expected = f"'{text}'" if text is not None else str(kind)
            raise UnexpectedTokenError(
                f"Expected {expected} but found {token.describe()}",
                token.line,
                token.column,
            )
        return self.advance()

    def execute(self) -> SwiftletError | None:
        """
        Run statements from the cursor until EOF or the first error.

        Errors are not raised: they are reported to the session's error
        channel and returned. The scope stack is always left with only the
        global frame.

        Returns:
            The reported error, or None on success.
        """
        logger.debug("Executing %s from token %d", self.file, self.position)
        try:
            while not self.at_end():
                self.statement()
        except SwiftletError as e:
            if e.file is None:
                e.file = self.file
            self.session.report(e)
            return e
        except RecursionError:
            # Every nested block adds Python frames
            tok = self.curr_token
            error = NestingTooDeepError(tok.line, tok.column, self.file)
            self.session.report(error)
            return error
        finally:
            self.scopes.reset()
        return None

    # Statement wrappers
    def statement(self) -> None:
        """
        Execute the statement under the cursor.
        """
        _stmt.execute_statement(self)

    def execute_block(self) -> None:
        """
        Execute statements up to, but not including, the closing brace.
        """
        _stmt.execute_block(self)

    def skip_block(self) -> None:
        """
        Move the cursor past the brace closing the block just entered.
        """
        _stmt.skip_block(self)

    # Expression wrappers
    def term(self):
        """
        Evaluate a literal or a variable reference.
        """
        return _expr.evaluate_term(self)

    def expression(self):
        """
        Evaluate terms joined by arithmetic operators, left to right.
        """
        return _expr.evaluate_expression(self)

    def condition(self) -> bool:
        """
        Evaluate a comparison between two expressions.
        """
        return _expr.evaluate_condition(self)
