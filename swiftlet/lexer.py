"""Lexer for Swiftlet.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, text and the line and column it starts on.

Tokens cover literals (integers, floats, strings), keywords (``var``, ``if``,
``while``, ``print`` …), identifiers, operators and punctuation. Whitespace,
``//`` line comments and ``/* … */`` block comments are skipped, with line and
column tracking carried across them so positions stay accurate. Multi-character
operators are listed ahead of the single-character ones so that ``<=`` always
lexes as one token.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum

from swiftlet.exceptions import LexError


class TokenKind(str, Enum):
    """
    Enumeration of token kinds.
    """

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    OPERATOR = "OPERATOR"
    PUNCTUATION = "PUNCTUATION"
    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS = frozenset({
    "var", "let", "if", "else", "while", "for", "print", "function",
    "return", "break", "continue", "true", "false",
})

MULTI_CHAR_OPERATORS = (
    "==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=", "*=", "/=",
)

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind, its source text and position.
    """
    kind: TokenKind
    text: str
    line: int
    column: int

    def __post_init__(self):
        if not isinstance(self.kind, TokenKind):
            raise ValueError(f"Unknown token kind: {self.kind!r}")
        if self.line < 1 or self.column < 1:
            raise ValueError(
                f"Token position must be positive, got {self.line}:{self.column}"
            )
        # Only EOF and an empty string literal carry no text
        if not self.text and self.kind not in (TokenKind.EOF, TokenKind.STRING):
            raise ValueError(f"{self.kind} token must have text")

    def matches(self, kind: TokenKind, text: str | None = None) -> bool:
        """
        Return True if the token is of ``kind`` (and has ``text``, when given).
        """
        return self.kind == kind and (text is None or self.text == text)

    def describe(self) -> str:
        """
        Describe the token for error messages.
        """
        if self.kind == TokenKind.EOF:
            return "end of input"
        return f"{self.kind} '{self.text}'"

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind}, {self.text!r}, line={self.line}, column={self.column})"


token_specification: list[tuple[str, str]] = [
    # Layout
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[^\S\n]+'),

    # Comments
    ('LINE_COMMENT',  r'//[^\n]*'),
    ('BLOCK_COMMENT', r'/\*.*?\*/'),
    ('OPEN_COMMENT',  r'/\*'),

    # Literals
    ('STRING',        r'"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\''),
    ('OPEN_STRING',   r'["\']'),
    ('FLOAT',         r'\d+\.\d*(?:[eE][+-]?\d+)?'),
    ('INTEGER',       r'\d+(?:[eE][+-]?\d+)?'),

    # Identifiers and keywords
    ('NAME',          r'(?:[^\W\d]|\$)[\w$]*'),

    # Operators, longest first
    ('OPERATOR',      '|'.join(re.escape(op) for op in MULTI_CHAR_OPERATORS)
                      + r'|[+\-*/%=<>!&|^~]'),

    # Delimiters
    ('PUNCTUATION',   r'[(){}\[\];,.]'),

    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


def _end_position(code: str, offset: int, line_num: int, line_start: int) -> tuple[int, int]:
    """
    Return the line and column reached by scanning from ``offset`` to the end of ``code``.
    """
    newlines = code.count('\n', offset)
    if newlines:
        line_num += newlines
        line_start = code.rfind('\n') + 1
    return line_num, len(code) - line_start + 1


def _unescape(body: str, line: int, column: int) -> str:
    """
    Decode the escape sequences of a string literal body.

    Raises:
        LexError: If an unknown escape sequence is found.
    """
    def replace(match_obj):
        char = match_obj.group(1)
        if char not in ESCAPES:
            raise LexError(f"Unexpected escape sequence: \\{char}", line, column)
        return ESCAPES[char]

    return re.sub(r'\\(.)', replace, body, flags=re.DOTALL)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, terminated by a single EOF token.

    Raises:
        LexError: If an unexpected character, an unterminated string or an
            unterminated block comment is encountered.
    """
    tokens: list[Token] = []
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'LINE_COMMENT'):
            continue
        if kind == 'OPEN_COMMENT':
            end_line, end_column = _end_position(code, match_obj.start(), line_num, line_start)
            raise LexError("Unterminated multi-line comment", end_line, end_column)
        if kind == 'OPEN_STRING':
            raise LexError("Unterminated string literal", line_num, column)
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character: {value}", line_num, column)

        if kind == 'STRING':
            text = _unescape(value[1:-1], line_num, column)
            tokens.append(Token(TokenKind.STRING, text, line_num, column))
        elif kind == 'NAME':
            name_kind = TokenKind.KEYWORD if value in KEYWORDS else TokenKind.IDENTIFIER
            tokens.append(Token(name_kind, value, line_num, column))
        elif kind != 'BLOCK_COMMENT':
            tokens.append(Token(TokenKind(kind), value, line_num, column))

        # Block comments and strings may span lines
        newlines = value.count('\n')
        if newlines:
            line_num += newlines
            line_start = match_obj.start() + value.rfind('\n') + 1

    tokens.append(Token(TokenKind.EOF, '', line_num, len(code) - line_start + 1))
    return tokens
