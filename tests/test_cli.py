import io

import pytest

from minischeme.cli import main
from minischeme.config import Settings
from minischeme.interpreter import Interpreter
from minischeme.shell import Shell

FIB_SOURCE = """
; naive recursive fibonacci over 1..20
(define fib (lambda (n) (if (< n 3) 1 (+ (fib (- n 1)) (fib (- n 2))))))
(define range (lambda (a b) (if (= a b) (quote ()) (cons a (range (+ a 1) b)))))
(map fib (range 1 21))
"""


def write_source(tmp_path, text, name="prog.scm"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


# ------------------ file mode ------------------

def test_fib_file(tmp_path, capsys):
    path = write_source(tmp_path, FIB_SOURCE)
    assert main([path, "--no-color"]) == 0
    out, err = capsys.readouterr()
    assert out == "(1 1 2 3 5 8 13 21 34 55 89 144 233 377 610 987 1597 2584 4181 6765)\n"
    assert err == ""


def test_file_prints_only_last_result(tmp_path, capsys):
    path = write_source(tmp_path, "(+ 1 1)\n(* 2 3)\n")
    assert main([path]) == 0
    assert capsys.readouterr().out == "6\n"


@pytest.mark.parametrize("text", ["", "; nothing here\n", "(define x 1)\n"])
def test_file_without_printable_result(tmp_path, capsys, text):
    path = write_source(tmp_path, text)
    assert main([path]) == 0
    assert capsys.readouterr().out == ""


def test_file_display_output(tmp_path, capsys):
    path = write_source(tmp_path, '(display "hello") (newline)')
    assert main([path]) == 0
    assert capsys.readouterr().out == "hello\n"


@pytest.mark.parametrize(
    "text,message",
    [
        ("(define x 1)\n(car (list))\n", "SchemeTypeError: car of the empty list"),
        ("(+ y 1)", "UnboundSymbolError: Unbound symbol y"),
        ("(+ 1", "IncompleteInputError"),
        (")", "SchemeSyntaxError"),
        ("(/ 1 0)", "DivisionByZeroError"),
        ("((lambda (x) x))", "ArityError"),
    ]
)
def test_file_errors(tmp_path, capsys, text, message):
    path = write_source(tmp_path, text)
    assert main([path, "--no-color"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("error: ")
    assert message in err


def test_file_error_stops_before_later_output(tmp_path, capsys):
    path = write_source(tmp_path, '(display "a") (car (list)) (display "b")')
    assert main([path, "--no-color"]) == 1
    assert capsys.readouterr().out == "a"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.scm"), "--no-color"]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "minischeme" in capsys.readouterr().out


def test_repl_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(define x 2)\n(* x 21)\n"))
    assert main(["--no-color"]) == 0
    assert "42" in capsys.readouterr().out.splitlines()[0]


# ------------------ REPL ------------------

def run_shell(text, **settings):
    out, err = io.StringIO(), io.StringIO()
    settings.setdefault("color", False)
    shell = Shell(Interpreter(), Settings(**settings), stdin=io.StringIO(text), stdout=out, stderr=err)
    shell.cmdloop(intro="")
    return out.getvalue(), err.getvalue()


def test_shell_prints_values_but_not_unspecified():
    out, err = run_shell("(define x 5)\nx\n(list x #t)\n", prompt="")
    assert out == "5\n(5 #t)\n"
    assert err == ""


def test_shell_several_expressions_per_line():
    out, _ = run_shell("1 2 (+ 1 2)\n", prompt="")
    assert out == "1\n2\n3\n"


def test_shell_prompts_and_continuation_lines():
    out, _ = run_shell("(+ 1\n\n2)\n")
    assert out == "minischeme> ... ... 3\nminischeme> "


def test_shell_continues_after_errors():
    out, err = run_shell("(car (list))\n)\n(+ 1 1)\n", prompt="")
    assert out == "2\n"
    assert "SchemeTypeError" in err
    assert "SchemeSyntaxError: Unexpected ')'" in err


def test_shell_keeps_partial_side_effects():
    out, err = run_shell("(define a 1) (car (list)) (define b 2)\na\nb\n", prompt="")
    assert out == "1\n"
    assert "UnboundSymbolError: Unbound symbol b" in err


def test_shell_reports_unfinished_input_at_eof():
    out, err = run_shell("(+ 1\n", prompt="", continuation_prompt="")
    assert out == ""
    assert "Unexpected end of input" in err


def test_shell_help_and_continuation_source():
    out, _ = run_shell("help\n", prompt="")
    assert "Enter Scheme expressions" in out
    out, err = run_shell("(list\nhelp)\n", prompt="", continuation_prompt="")
    assert "UnboundSymbolError: Unbound symbol help" in err


def test_shell_reports_runaway_recursion():
    out, err = run_shell("(define (loop n) (+ 1 (loop n)))\n(loop 1)\n(+ 1 1)\n", prompt="")
    assert "maximum recursion depth exceeded" in err
    assert out == "2\n"


def test_shell_prints_huge_integers_and_reports_float_overflow():
    out, err = run_shell("(pow 10 5000)\n(+ (pow 2 2000) 0.5)\n(+ 1 1)\n", prompt="")
    assert out == "1" + "0" * 5000 + "\n2\n"
    assert "DomainError" in err


def test_shell_evaluates_symbols_that_look_like_commands():
    out, err = run_shell("(define help-me 3)\nhelp-me\n?\n", prompt="")
    assert out == "3\n"
    assert "UnboundSymbolError: Unbound symbol ?" in err
    assert "Enter Scheme expressions" not in out


def test_file_float_overflow_is_reported(tmp_path, capsys):
    path = write_source(tmp_path, "(* (pow 2 2000) 1.5)")
    assert main([path, "--no-color"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "DomainError" in err


def test_file_linear_recursion_depth_1000(tmp_path, capsys):
    path = write_source(tmp_path, "(define (sum n) (if (= n 0) 0 (+ n (sum (- n 1)))))\n(sum 1000)\n")
    assert main([path]) == 0
    assert capsys.readouterr().out == "500500\n"
