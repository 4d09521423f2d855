import io
import os
import sys

import pytest

from minish.builtins import ShellState
from minish.shell import describe_line, launch_program, main, read_command, run_loop
from minish.syntax import ShellSyntaxError


def make_state():
    return ShellState(variables={}, out=io.StringIO(), err=io.StringIO())


def test_launch_program_returns_status():
    assert launch_program([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3


def test_launch_program_success():
    assert launch_program([sys.executable, "-c", "pass"]) == 0


def test_launch_program_missing(capsys):
    assert launch_program(["/nonexistent/program-xyz"]) == 1
    assert capsys.readouterr().err.startswith("minishell: ")


def test_read_command_returns_line(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls -l\n"))
    assert read_command("> ") == "ls -l"


def test_read_command_eof(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert read_command("> ") is None


def test_run_loop_cd_then_exit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "dir"
    target.mkdir()
    state = make_state()
    assert run_loop(io.StringIO(f"cd {target}\nexit\n"), state) == 0
    assert os.path.samefile(os.getcwd(), target)
    assert state.out.getvalue() == "minishell$ " * 2


def test_run_loop_stops_at_exit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "dir"
    target.mkdir()
    state = make_state()
    assert run_loop(io.StringIO(f"exit\ncd {target}\n"), state) == 0
    assert state.out.getvalue() == "minishell$ "
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_run_loop_skips_blank_lines():
    state = make_state()
    run_loop(io.StringIO("   \n\n"), state)
    assert state.out.getvalue() == "minishell$ " * 3


def test_run_loop_records_status():
    state = make_state()
    script = io.StringIO(f"{sys.executable} -c exit(4)\n")
    run_loop(script, state)
    assert state.last_status == 4


def test_describe_line_reports_tokens_and_redirects():
    report = describe_line("ls   -l > out")
    assert "  [0]: ls\n  [1]: -l\n  [2]: >\n  [3]: out\n" in report
    assert "IN:  1 \n" in report
    assert "OUT: 0 \n" in report


def test_describe_line_rejects_bad_syntax():
    with pytest.raises(ShellSyntaxError):
        describe_line("ls |")


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("cat << EOF\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "OUT: 2 \n" in out


def test_main_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("echo ; ls\n"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "`;'" in captured.err


def test_main_no_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1