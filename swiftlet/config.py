"""Runtime settings read from the environment.

``SWIFTLET_DEBUG``
    Any non-empty value turns on debug logging and token dumps in the CLI.
``SWIFTLET_MAX_ITERATIONS``
    Iteration cap for ``while`` loops (default 10000).


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 10_000


@dataclass(frozen=True)
class Settings:
    """Interpreter settings."""

    debug: bool = False
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    @classmethod
    def from_env(cls, environ=None) -> 'Settings':
        """
        Build settings from environment variables.

        Raises:
            ValueError: If ``SWIFTLET_MAX_ITERATIONS`` is not a positive integer.
        """
        environ = os.environ if environ is None else environ
        raw_limit = environ.get('SWIFTLET_MAX_ITERATIONS', '').strip()
        max_iterations = DEFAULT_MAX_ITERATIONS
        if raw_limit:
            max_iterations = int(raw_limit)
            if max_iterations < 1:
                raise ValueError(
                    f"SWIFTLET_MAX_ITERATIONS must be a positive integer, got {raw_limit!r}"
                )
        return cls(
            debug=bool(environ.get('SWIFTLET_DEBUG')),
            max_iterations=max_iterations,
        )
