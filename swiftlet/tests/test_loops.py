"""
Tests for while loops in Swiftlet.
"""
from swiftlet.exceptions import LoopLimitExceeded, UnclosedBlockError

from swiftlet.tests.utils import output_lines, run_source


def test_loop_runs_until_condition_fails(capsys):
    """The loop body runs exactly as many times as the condition holds."""
    source = (
        "var i = 0\n"
        "var runs = 0\n"
        "while i < 5 {\n"
        "    i = i + 1\n"
        "    runs = runs + 1\n"
        "}\n"
        "print(i)\n"
        "print(runs)\n"
    )
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == ["5", "5"]


def test_sum_of_first_n(capsys):
    """Loop bodies on one line with semicolons produce the expected sum."""
    source = "var sum=0\nvar n=3\nvar i=1\nwhile i<=n { sum=sum+i; i=i+1 }\nprint(sum)"
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == ["6"]


def test_loop_that_never_runs(capsys):
    """A false condition skips the whole body and execution continues after it."""
    source = (
        "var i = 5\n"
        "while i < 3 {\n"
        "    print(i)\n"
        "    if i == 1 { print(\"nested\") }\n"
        "}\n"
        "print(\"done\")\n"
    )
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == ["done"]


def test_nested_loops(capsys):
    """Inner loops rewind independently and the outer loop resumes after them."""
    source = (
        "var i = 0\n"
        "var total = 0\n"
        "while i < 3 {\n"
        "    var j = 0\n"
        "    while j < 2 {\n"
        "        total = total + 1\n"
        "        j = j + 1\n"
        "    }\n"
        "    i = i + 1\n"
        "}\n"
        "print(total)\n"
    )
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == ["6"]


def test_loop_body_declarations_are_fresh_each_iteration(capsys):
    """Each iteration gets a new frame, so ``var`` in the body can run again."""
    source = (
        "var i = 0\n"
        "while i < 3 {\n"
        "    var x = i * 10\n"
        "    print(x)\n"
        "    i = i + 1\n"
        "}\n"
    )
    _, error = run_source(source)
    assert error is None
    assert output_lines(capsys) == ["0", "10", "20"]


def test_loop_limit_stops_runaway_loop(capsys):
    """The loop fails on the iteration after the cap."""
    source = (
        "var i = 0\n"
        "while 1 == 1 {\n"
        "    i = i + 1\n"
        "    print(i)\n"
        "}\n"
    )
    interpreter, error = run_source(source, max_iterations=3)
    assert isinstance(error, LoopLimitExceeded)
    assert error.limit == 3
    assert (error.line, error.column) == (2, 1)
    assert output_lines(capsys) == ["1", "2", "3"]
    assert interpreter.session.globals()["i"] == 3


def test_default_loop_limit():
    """Without an override the cap is 10000 iterations."""
    interpreter, error = run_source("var i = 0\nwhile i >= 0 { i = i + 1 }")
    assert isinstance(error, LoopLimitExceeded)
    assert error.limit == 10000
    assert interpreter.session.globals()["i"] == 10000


def test_unclosed_loop_body():
    """A loop body without a closing brace is reported."""
    _, error = run_source("var i = 0\nwhile i < 1 {\n    i = i + 1\n")
    assert isinstance(error, UnclosedBlockError)


def test_unclosed_loop_body_that_never_runs():
    """Skipping a body also needs its closing brace."""
    _, error = run_source("while 1 > 2 {\n    print(1)\n")
    assert isinstance(error, UnclosedBlockError)
