import logging

import pytest

from skate.interpreter import Interpreter
from skate.repl import Repl
from skate.types.expression import Float


def scripted(lines):
    """input_fn that replays `lines`, then signals end of input."""
    it = iter(lines)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    _input.prompts = prompts
    return _input


def run_repl(lines, **kwargs):
    out = []
    repl = Repl(input_fn=scripted(lines), output_fn=out.append, **kwargs)
    status = repl.run()
    return status, out, repl


def test_repl_prints_results():
    status, out, _ = run_repl(["(+ 1 2)", "'a'", "(- 5 2 1)"])
    assert status == 0
    assert out == ["(FLOAT, 3)", "(LITERAL, a)", "(FLOAT, -8)"]


def test_repl_keeps_definitions_between_lines():
    _, out, repl = run_repl(["(def 'x' 40)", "(+ x 2)"])
    assert out == ["(FLOAT, 40)", "(FLOAT, 42)"]
    assert repl.interp.env.lookup("x") == Float(40)


def test_repl_reports_errors_and_continues():
    _, out, _ = run_repl(["(foo 1)", ")", "()", "(+ 1 1)"])
    assert out[0].startswith("Error: UnboundSymbol:")
    assert "foo" in out[0]
    assert out[1].startswith("Error: UnmatchedCloseParen:")
    assert out[2].startswith("Error: EmptyList:")
    assert out[3] == "(FLOAT, 2)"


def test_failed_line_does_not_corrupt_env():
    _, out, repl = run_repl(["(def 'x' 1)", "(def 'x' 2 3)", "x"])
    assert out[-1] == "(FLOAT, 1)"


def test_repl_skips_blank_lines():
    _, out, _ = run_repl(["", "   ", "1"])
    assert out == ["(FLOAT, 1)"]


@pytest.mark.parametrize("command", [":quit", ":q", "  :q  "])
def test_repl_quit_commands(command):
    status, out, _ = run_repl(["1", command, "2"])
    assert status == 0
    assert out == ["(FLOAT, 1)"]


def test_repl_exit_builtin_sets_status():
    status, out, _ = run_repl(["1", "(exit 4)", "2"])
    assert status == 4
    assert out == ["(FLOAT, 1)"]


def test_repl_uses_prompt():
    inp = scripted(["1"])
    Repl(input_fn=inp, output_fn=lambda s: None, prompt="> ").run()
    assert inp.prompts == ["> ", "> "]


def test_repl_prompt_from_config(monkeypatch):
    monkeypatch.setenv("SKATE_PROMPT", "skate% ")
    inp = scripted([])
    Repl(input_fn=inp, output_fn=lambda s: None).run()
    assert inp.prompts == ["skate% "]


def test_repl_strict_interpreter():
    _, out, _ = run_repl(["1 2"], interpreter=Interpreter(strict=True))
    assert out[0].startswith("Error: TrailingTokens:")


def test_repl_keyboard_interrupt_continues():
    calls = iter([KeyboardInterrupt, "1"])

    def _input(prompt):
        item = next(calls, None)
        if item is None:
            raise EOFError
        if item is KeyboardInterrupt:
            raise KeyboardInterrupt
        return item

    out = []
    assert Repl(input_fn=_input, output_fn=out.append).run() == 0
    assert out == ["", "(FLOAT, 1)"]


def test_repl_env_listing(capsys):
    _, out, _ = run_repl(["(def 'x' 1)", "(env)"])
    assert out[-1] == "(NULL, null)"
    assert "x = (FLOAT, 1)" in capsys.readouterr().out


def test_step_renders_single_line():
    repl = Repl(input_fn=scripted([]), output_fn=lambda s: None)
    assert repl.step("(+ 2 2)") == "(FLOAT, 4)"
    assert repl.step("") is None


def test_repl_survives_deep_nesting():
    deep = "(+ " * 1200 + "1" + ")" * 1200
    status, out, _ = run_repl([deep, "(+ 1 1)"])
    assert status == 0
    assert out[0].startswith("Error: NestingTooDeep:")
    assert out[1] == "(FLOAT, 2)"


def test_reported_errors_are_not_logged_as_errors(caplog):
    caplog.set_level(logging.DEBUG, logger="skate.repl")
    _, out, _ = run_repl(["(foo 1)"])
    assert out[0].startswith("Error: UnboundSymbol:")
    records = [r for r in caplog.records if "UnboundSymbol" in r.getMessage()]
    assert records
    assert all(r.levelno < logging.WARNING for r in records)
