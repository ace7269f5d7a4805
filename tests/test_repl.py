import builtins

import pytest

from eta import repl
from eta.interpreter import Interpreter


@pytest.fixture(autouse=True)
def _no_prelude(monkeypatch):
    monkeypatch.delenv("ETA_PRELUDE_PATH", raising=False)


def test_respond():
    interp = Interpreter(prelude=None)
    assert repl.respond(interp, "(+ 1 2)") == (0, "3")
    assert repl.respond(interp, "(bogus)") == (1, "Unknown symbol: bogus")
    status, text = repl.respond(interp, "(/ 1 0)")
    assert status == 2
    assert text.startswith("internal fault: ")


def test_respond_reports_deep_nesting_as_fault():
    interp = Interpreter(prelude=None)
    status, text = repl.respond(interp, "(quote " + "(" * 3000 + ")" * 3000 + ")")
    assert status == 2
    assert text.startswith("internal fault: ")


@pytest.mark.parametrize(
    "expr,status,out,err",
    [
        ("(* 6 7)", 0, "42\n", ""),
        ("(bogus)", 1, "", "Unknown symbol: bogus\n"),
    ],
)
def test_single_expression(capsys, expr, status, out, err):
    assert repl.main(["--expr", expr]) == status
    captured = capsys.readouterr()
    assert captured.out == out
    assert captured.err == err


def test_interactive_session(capsys, monkeypatch):
    lines = iter(["(def a 2)", "", "(* a 21)", "(+ a)"])

    def fake_input(prompt):
        assert prompt == repl.PROMPT
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert repl.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["#true", "42", "Expected 2 arguments to +, got 1", ""]
