"""
Utility functions shared across Swiftlet tests.
"""
from pathlib import Path
import sys

from swiftlet.exceptions import SwiftletError
from swiftlet.interpreter import Interpreter
from swiftlet.lexer import tokenize
from swiftlet.session import Session

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def run_source(
    source: str,
    session: Session | None = None,
    max_iterations: int | None = None,
) -> tuple[Interpreter, SwiftletError | None]:
    """
    Tokenize and execute source code.

    Returns the interpreter after execution and the reported error, if any.
    """
    tokens = tokenize(source)
    interpreter = Interpreter(
        tokens, session=session, file="<test>", max_iterations=max_iterations
    )
    error = interpreter.execute()
    return interpreter, error


def output_lines(capsys) -> list[str]:
    """
    Return the captured standard output as a list of lines.
    """
    return capsys.readouterr().out.strip().splitlines()
