"""Interpreter package for Swiftlet.

This package splits the interpreter functionality into multiple modules to
keep the code organized. The :class:`Interpreter` class is exposed at the
package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from .interpreter import Interpreter

__all__ = ["Interpreter"]
