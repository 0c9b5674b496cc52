"""Errors.

Every failure raised by the lexer or the interpreter carries a human readable
message together with the line and column of the offending token (lexical
errors use the scan position at the point of failure).


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class SwiftletError(Exception):
    """
    Base class for positional errors.
    """
    def __init__(self, message, line=None, column=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        # The file is often only known once the error reaches the host.
        self.file = file
        super().__init__(message)

    def __str__(self) -> str:
        message = self.message
        if self.line is not None:
            message += f" on line {self.line}"
            if self.column is not None:
                message += f", column {self.column}"
        if self.file is not None:
            message += f" in {self.file}"
        return message


class LexError(SwiftletError):
    """
    Error for unexpected characters, unterminated strings and comments.
    """


class UnhandledKeywordError(SwiftletError):
    """
    Error for keywords that cannot start a statement.
    """
    def __init__(self, keyword, line=None, column=None, file=None):
        self.keyword = keyword
        super().__init__(f"Unhandled keyword '{keyword}'", line, column, file)


class UndefinedVariableError(SwiftletError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, column, file)


class RedeclarationError(SwiftletError):
    """
    Error for declaring a variable that is already in scope.
    """
    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(
            f"Variable '{varname}' already declared in current scope", line, column, file
        )


class UnexpectedTokenError(SwiftletError):
    """
    Error for a token of the wrong kind or value at an expect point.
    """


class ScriptArithmeticError(SwiftletError, ArithmeticError):
    """
    Error for division or modulo by zero and out of range numbers.
    """


class OperandTypeError(SwiftletError, TypeError):
    """
    Error for operands an operator cannot be applied to.
    """


class LoopLimitExceeded(SwiftletError):
    """
    Error for a loop that ran past the iteration cap.
    """
    def __init__(self, limit, line=None, column=None, file=None):
        self.limit = limit
        super().__init__(
            f"Maximum loop iteration count ({limit}) exceeded", line, column, file
        )


class UnclosedBlockError(SwiftletError):
    """
    Error for a block whose closing brace is missing.
    """
    def __init__(self, line=None, column=None, file=None):
        super().__init__("Unclosed block", line, column, file)


class NestingTooDeepError(SwiftletError):
    """
    Error for blocks nested deeper than the interpreter can follow.
    """
    def __init__(self, line=None, column=None, file=None):
        super().__init__("Blocks nested too deeply", line, column, file)
