"""Scope stack.

Frames form a stack, not a tree. Frame 0 is the global frame and is never
removed. Each frame only stores the names declared in it; nothing is copied
when a frame is pushed. Two rules give the same observable behaviour as a
stack in which every new frame starts as a copy of the one below:

- a declaration goes into the top frame, and fails if the name is already
  visible (a copied frame would already hold it);
- an update writes into the frame that owns the name, so it outlives the
  block when the variable existed before the block was entered.


File: scope.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from collections import ChainMap

from swiftlet.exceptions import RedeclarationError

logger = logging.getLogger(__name__)


class FrozenNamespace(dict):
    """Dictionary that disallows modification."""

    def __readonly(self, *_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise TypeError("Scope views are read-only")

    __setitem__ = __readonly  # type: ignore[assignment]
    __delitem__ = __readonly  # type: ignore[assignment]
    pop = __readonly  # type: ignore[assignment]
    popitem = __readonly  # type: ignore[assignment]
    clear = __readonly  # type: ignore[assignment]
    update = __readonly  # type: ignore[assignment]
    setdefault = __readonly  # type: ignore[assignment]


class ScopeStack:
    """Stack of variable frames with a persistent global frame."""

    def __init__(self, global_vars: dict | None = None):
        self._frames: list[dict] = [global_vars if global_vars is not None else {}]

    @property
    def depth(self) -> int:
        """Number of frames on the stack, the global frame included."""
        return len(self._frames)

    def globals(self) -> dict:
        """Return the global frame."""
        return self._frames[0]

    def current(self) -> FrozenNamespace:
        """
        Return a read-only view of every binding visible from the top frame.
        """
        return FrozenNamespace(ChainMap(*reversed(self._frames)))

    def push(self) -> None:
        """Enter a block."""
        self._frames.append({})

    def pop(self) -> None:
        """Leave a block. Popping the global frame is a no-op."""
        if len(self._frames) > 1:
            self._frames.pop()

    def reset(self) -> None:
        """Unwind to the global frame."""
        del self._frames[1:]

    def _owner(self, name: str) -> dict | None:
        for frame in reversed(self._frames):
            if name in frame:
                return frame
        return None

    def exists(self, name: str) -> bool:
        """Return True if ``name`` is bound in any frame."""
        return self._owner(name) is not None

    def lookup(self, name: str):
        """
        Return the value bound to ``name``.

        Raises:
            KeyError: If the name is not bound in any frame.
        """
        frame = self._owner(name)
        if frame is None:
            raise KeyError(name)
        return frame[name]

    def declare(self, name: str, value, line=None, column=None) -> None:
        """
        Bind ``name`` in the top frame.

        Raises:
            RedeclarationError: If ``name`` is already visible.
        """
        if self.exists(name):
            raise RedeclarationError(name, line, column)
        self._frames[-1][name] = value
        logger.debug("Declared variable %s = %r at depth %d", name, value, self.depth - 1)

    def update(self, name: str, value) -> None:
        """
        Rebind ``name`` in the frame that declared it.

        Raises:
            KeyError: If the name is not bound in any frame.
        """
        frame = self._owner(name)
        if frame is None:
            raise KeyError(name)
        frame[name] = value
        logger.debug("Updated variable %s = %r", name, value)
