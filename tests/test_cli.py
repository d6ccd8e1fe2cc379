"""Tests for CLI helpers: _show_vars, _process_line, main."""

import io

from jsondoc import JsonRepl
from jsondoc.repl import _process_line, _show_vars, main


# ---------------------------------------------------------------------------
# _show_vars
# ---------------------------------------------------------------------------

def test_show_vars_empty():
    out = io.StringIO()
    _show_vars(JsonRepl(), out)
    assert "(no variables defined)" in out.getvalue()


def test_show_vars_lists_handles():
    repl = JsonRepl()
    repl.eval("new root")
    out = io.StringIO()
    _show_vars(repl, out)
    assert "root" in out.getvalue()
    assert "_json_instance_0" in out.getvalue()


# ---------------------------------------------------------------------------
# _process_line
# ---------------------------------------------------------------------------

def test_quit():
    repl = JsonRepl()
    assert _process_line(repl, ":q", io.StringIO()) is False
    assert _process_line(repl, ":quit", io.StringIO()) is False


def test_blank_and_comment_lines():
    repl = JsonRepl()
    assert _process_line(repl, "", io.StringIO()) is True
    assert _process_line(repl, "# a comment", io.StringIO()) is True


def test_reset_command():
    repl = JsonRepl()
    _process_line(repl, "new h", io.StringIO())
    _process_line(repl, ":reset", io.StringIO())
    assert repl.vars == {}


def test_vars_command():
    repl = JsonRepl()
    out = io.StringIO()
    _process_line(repl, "new h", out)
    _process_line(repl, ":vars", out)
    assert "h" in out.getvalue()


def test_errors_reported_not_raised(capsys):
    repl = JsonRepl()
    assert _process_line(repl, "ghost encode", io.StringIO()) is True
    _process_line(repl, "new h", io.StringIO())
    _process_line(repl, "h explode", io.StringIO())
    _process_line(repl, 'h set s string "unterminated', io.StringIO())
    err = capsys.readouterr().err
    assert "undefined variable: ghost" in err
    assert "unknown method" in err
    assert err.count("Error:") == 3


def test_encode_to_dest():
    repl = JsonRepl()
    out = io.StringIO()
    for line in ("new h", "h set a integer 1", "h encode"):
        _process_line(repl, line, out)
    assert out.getvalue() == '{ "a":1 }\n'


def test_batch_file(tmp_path):
    script = tmp_path / "build.txt"
    script.write_text(
        "new h\n"
        "h set name string probe\n"
        "h set up boolean 1\n"
        "h encode\n",
        encoding="utf-8",
    )
    repl = JsonRepl()
    out = io.StringIO()
    _process_line(repl, f"?<< {script}", out)
    assert out.getvalue() == '{ "name":"probe","up":true }\n'


def test_batch_missing_file(tmp_path, capsys):
    _process_line(JsonRepl(), f"?<< {tmp_path / 'nope.txt'}", io.StringIO())
    assert "Error reading" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_runs_files(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("JSONDOC_MAX_INSTANCES", raising=False)
    script = tmp_path / "doc.txt"
    script.write_text(
        "new h\nh add c integer 1\nh add c integer 2\nh encode\nh destroy\n",
        encoding="utf-8",
    )
    main([str(script)])
    assert capsys.readouterr().out == '{ "c":[ 1,2 ] }\n'


def test_main_interactive(monkeypatch, capsys):
    lines = iter(["new h", "h set a integer 7", "h encode", ":q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main([])
    out = capsys.readouterr().out
    assert '{ "a":7 }\n' in out


def test_main_redirects_output(monkeypatch, capsys, tmp_path):
    target = tmp_path / "out.json"
    lines = iter(["new h", "h set a integer 1", f"?>> {target}", "h encode", "?>>",
                  "h set b integer 2", "h encode", ":q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main([])
    assert target.read_text(encoding="utf-8") == '{ "a":1 }\n'
    assert '{ "a":1,"b":2 }\n' in capsys.readouterr().out


def test_main_bad_redirect_keeps_stdout(monkeypatch, capsys, tmp_path):
    lines = iter(["new h", f"?>> {tmp_path / 'missing' / 'out.json'}", "h encode", ":q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main([])
    captured = capsys.readouterr()
    assert "Error opening" in captured.err
    assert "{  }\n" in captured.out


def test_main_survives_destroyed_child(monkeypatch, capsys):
    lines = iter(["new h", "h set a integer 1", "h set kid object k", "k destroy",
                  "h destroy", "h encode", ":q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main([])
    assert "undefined variable: h" in capsys.readouterr().err
