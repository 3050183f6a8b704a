import builtins

import pytest

from silence.interpreter import Interpreter
from silence.repl import main, terminal_repl


def test_eval_and_print(capsys):
    assert main(["-ep", "(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_eval_is_silent_apart_from_program_output(capsys):
    assert main(["-e", '(begin (print "hi") 5)']) == 0
    assert capsys.readouterr().out == "hi"


def test_failure_exits_with_status_one(capsys):
    assert main(["-ep", "(car 1)"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err


def test_file_modes(tmp_path, capsys):
    prog = tmp_path / "prog.sil"
    prog.write_text("(let! 'x 6)\n(* x 7)\n", encoding="utf-8")
    assert main(["-fp", str(prog)]) == 0
    assert capsys.readouterr().out == "42\n"
    assert main(["-f", str(prog)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.sil")]) == 1
    assert "error" in capsys.readouterr().err


def test_prelude_flag(capsys):
    assert main(["--prelude", "-ep", "(length '(1 2))"]) == 0
    assert capsys.readouterr().out == "2\n"


def test_invalid_arguments():
    with pytest.raises(SystemExit):
        main(["-e", "1", "-f", "x"])


def test_repl_prints_results_and_survives_errors(monkeypatch, capsys):
    lines = iter(["(let! 'x 2)", "", "(car 1)", "(* x 21)"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    assert terminal_repl(Interpreter()) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2"
    assert out[1].startswith("error:")
    assert out[2] == "42"
