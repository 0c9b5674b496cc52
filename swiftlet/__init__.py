"""Swiftlet: a token-walk interpreter for a small imperative scripting language.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .interpreter import Interpreter
from .lexer import Token, TokenKind, tokenize
from .session import Session, is_complete_source

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "Session",
    "Token",
    "TokenKind",
    "is_complete_source",
    "tokenize",
]
