"""
Swiftlet Language Interpreter

This is the main entry point for the Swiftlet interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into keywords, identifiers, literals,
   operators and punctuation.
3. The Interpreter walks the tokens directly, executing statements and
   evaluating expressions as it reads them.

Without a script the interpreter runs as a REPL: lines are buffered until they
form a complete fragment, which then runs in a session that keeps its global
variables between fragments.
"""
import logging
import sys

from swiftlet.config import Settings
from swiftlet.session import Session, is_complete_source


def print_usage():
    """
    Print usage.
    """
    print()
    print("Swiftlet Language Interpreter")
    print()
    print("Usage:")
    print("    swl [--tokens] <script.swl>")
    print()
    print("Arguments:")
    print("    <script.swl>")
    print("        Path to a Swiftlet source file to execute.")
    print()
    print("Example:")
    print("    swl sum.swl")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    --tokens")
    print("        Print the token list before running the script.")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    SWIFTLET_DEBUG           enable debug logging and token dumps")
    print("    SWIFTLET_MAX_ITERATIONS  loop iteration cap (default 10000)")


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger for command line use.
    """
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def debug_print_tokens(tokens):
    """
    Print tokenized source
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print(" ")


def run_script(script_name: str, settings: Settings, show_tokens: bool = False) -> int:
    """
    Run a Swiftlet script.

    Returns:
        int: 0 on success, 1 if the script failed.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    session = Session(max_iterations=settings.max_iterations)
    if show_tokens or settings.debug:
        tokens = session.tokenize(code, script_name)
        if tokens is None:
            return 1
        debug_print_tokens(tokens)
        error = session.run_tokens(tokens, script_name)
    else:
        error = session.run(code, script_name)
    return 0 if error is None else 1


def run_repl(settings: Settings):
    """
    Run the interactive REPL
    """
    print("Swiftlet Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    session = Session(max_iterations=settings.max_iterations)
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            if not line.strip():
                continue
            buffer.append(line)
            source = "\n".join(buffer)
            if not is_complete_source(source):
                continue
            # Errors are reported by the session; the fragment is discarded either way
            session.run(source, "<stdin>")
            buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - A script path, optionally preceded by ``--tokens``: run the script.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    settings = Settings.from_env()
    configure_logging(settings)

    if not args:
        run_repl(settings)
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0], settings)
    if len(args) == 2 and args[0] == '--tokens':
        return run_script(args[1], settings, show_tokens=True)
    print_usage()
    return 1


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
