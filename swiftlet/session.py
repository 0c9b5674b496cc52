"""Interpreter sessions.

A :class:`Session` is the state a host keeps between program fragments: the
global variable frame, where ``print`` output goes and where errors are
reported. Fragments run in the same session see each other's globals, which is
what the REPL relies on.


File: session.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
import sys

from swiftlet.config import Settings
from swiftlet.exceptions import LexError, SwiftletError
from swiftlet.lexer import Token, tokenize
from swiftlet.scope import ScopeStack

logger = logging.getLogger(__name__)

_BLOCK_HEADER = re.compile(r'^(if|while|else)\b')
_TRAILING_ELSE = re.compile(r'\belse$')


def format_value(value) -> str:
    """Return the textual form ``print`` writes for a value."""
    return str(value)


def report_to_stderr(error: SwiftletError) -> None:
    """Default error channel."""
    print(f"{type(error).__name__}: {error}", file=sys.stderr)


def is_complete_source(code: str) -> bool:
    """
    Decide whether accumulated REPL input can be run.

    The input is incomplete while its braces are unbalanced, or while its
    last non-blank line opens a block: it ends with ``{`` or ``else``, or it
    starts with ``if``, ``while`` or ``else`` and has not closed a brace yet.
    """
    if code.count('{') != code.count('}'):
        return False
    lines = [line.strip() for line in code.splitlines() if line.strip()]
    if not lines:
        return True
    last_line = lines[-1]
    if last_line.endswith('{') or _TRAILING_ELSE.search(last_line):
        return False
    return not (_BLOCK_HEADER.match(last_line) and '}' not in last_line)


class Session:
    """Global state shared by successive program fragments."""

    def __init__(self, output=None, errors=None, max_iterations: int | None = None):
        """
        Initialize the session.

        Parameters:
            output (callable): Receives the text of each ``print``. Defaults to
                writing a line to standard output.
            errors (callable): Receives each reported error. Defaults to
                writing it to standard error.
            max_iterations (int): Loop iteration cap. Defaults to
                ``SWIFTLET_MAX_ITERATIONS`` or 10000.
        """
        self.scopes = ScopeStack()
        self.output = output if output is not None else print
        self.errors = errors if errors is not None else report_to_stderr
        if max_iterations is None:
            max_iterations = Settings.from_env().max_iterations
        self.max_iterations = max_iterations
        self._interpreter = None

    def globals(self) -> dict:
        """Return the global bindings."""
        return self.scopes.globals()

    def emit(self, value) -> None:
        """Write a printed value to the output sink."""
        self.output(format_value(value))

    def report(self, error: SwiftletError) -> None:
        """Hand an error to the error channel."""
        logger.info("%s: %s", type(error).__name__, error)
        self.errors(error)

    def tokenize(self, code: str, file: str = "<stdin>") -> list[Token] | None:
        """
        Tokenize a fragment, reporting a lexical error instead of raising it.

        Returns:
            The tokens, or None if the fragment could not be tokenized.
        """
        try:
            return tokenize(code)
        except LexError as e:
            if e.file is None:
                e.file = file
            self.report(e)
            return None

    def run(self, code: str, file: str = "<stdin>") -> SwiftletError | None:
        """
        Tokenize and execute one program fragment.

        A lexical error rejects the whole fragment before anything runs.
        Runtime errors stop the fragment but keep globals bound before the
        failure.

        Returns:
            The reported error, or None if the fragment ran to the end.
        """
        try:
            tokens = tokenize(code)
        except LexError as e:
            if e.file is None:
                e.file = file
            self.report(e)
            return e
        return self.run_tokens(tokens, file)

    def run_tokens(self, tokens: list[Token], file: str = "<stdin>") -> SwiftletError | None:
        """
        Execute a fragment that has already been tokenized.

        Returns:
            The reported error, or None if the fragment ran to the end.
        """
        from swiftlet.interpreter import Interpreter

        if self._interpreter is None:
            self._interpreter = Interpreter(tokens, session=self, file=file)
        else:
            self._interpreter.file = file
            self._interpreter.replace_tokens(tokens)
        return self._interpreter.execute()
