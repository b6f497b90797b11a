"""Tests for needless.cli module.

Tests option parsing, formatter selection, diff mode, stdin and file input.
"""

import io
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from needless.cli import build_parser, main, run_scan
from needless.formatters import dollar_formatter, readable_formatter

SOURCE = "func removeFromArray(_ array: Array) {}\nfunc appendArray(_ array: Array) {}\n"


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Empty project directory, no config anywhere."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    return tmp_path


def _run(argv, stdin_text=""):
    with patch("sys.stdin", io.StringIO(stdin_text)):
        with pytest.raises(SystemExit) as exc:
            main(argv)
    return exc.value.code


# ============================================
# Tests for build_parser()
# ============================================


class TestParser:
    def test_single_dash_format_options(self):
        args = build_parser().parse_args(["-Xcode", "-dollar", "a.swift"])
        assert args.formats == ["xcode", "dollar"]
        assert args.files == ["a.swift"]

    def test_long_format_option(self):
        args = build_parser().parse_args(["--format", "dollar"])
        assert args.formats == ["dollar"]

    def test_diff_flag(self):
        assert build_parser().parse_args(["-diff"]).diff is True
        assert build_parser().parse_args(["--diff"]).diff is True
        assert build_parser().parse_args([]).diff is None

    def test_unknown_option(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["-json"])
        assert exc.value.code == 2

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["-h"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "-Xcode" in out
        assert "[description]$[path]$[line number]" in out


# ============================================
# Tests for run_scan()
# ============================================


class TestRunScan:
    def test_stdin(self):
        out = io.StringIO()
        code = run_scan([], dollar_formatter, stdin=io.StringIO(SOURCE), out=out)
        assert code == 0
        assert out.getvalue().splitlines() == [
            "potential needless words in function name$$0$0"
            "$func removeFromArray(_ array: Array$func remove(from array: Array",
        ]

    def test_line_numbers_restart_per_file(self, tmp_path):
        a = tmp_path / "a.swift"
        b = tmp_path / "b.swift"
        a.write_text(SOURCE)
        b.write_text("\n" + SOURCE)
        out = io.StringIO()
        run_scan([str(a), str(b)], dollar_formatter, out=out)
        rows = [line.split("$") for line in out.getvalue().splitlines()]
        assert [(r[1], r[2]) for r in rows] == [(str(a), "0"), (str(b), "1")]

    def test_unreadable_file_does_not_stop_others(self, tmp_path, capsys):
        good = tmp_path / "good.swift"
        good.write_text(SOURCE)
        out = io.StringIO()
        code = run_scan([str(tmp_path / "missing.swift"), str(good)], dollar_formatter, out=out)
        assert code == 1
        assert len(out.getvalue().splitlines()) == 1
        assert "could not be read" in capsys.readouterr().out

    def test_readable_blocks_are_separated(self):
        out = io.StringIO()
        run_scan([], readable_formatter, stdin=io.StringIO(SOURCE), out=out)
        assert out.getvalue().endswith("…\n\n")

    def test_diff_mode(self):
        diff = "+" + SOURCE.replace("\n", "\n ", 1)
        out = io.StringIO()
        run_scan([], dollar_formatter, diff_mode=True, stdin=io.StringIO(diff), out=out)
        assert len(out.getvalue().splitlines()) == 1

    def test_diff_mode_skips_context(self):
        out = io.StringIO()
        run_scan([], dollar_formatter, diff_mode=True, stdin=io.StringIO(SOURCE), out=out)
        assert out.getvalue() == ""


# ============================================
# Tests for main()
# ============================================


class TestMain:
    def test_default_readable_from_stdin(self, project, capsys):
        assert _run([], SOURCE) == 0
        out = capsys.readouterr().out
        assert "possible alternative: func remove(from array: Array …" in out

    def test_first_format_option_wins(self, project, capsys):
        assert _run(["-dollar", "-Xcode"], SOURCE) == 0
        out = capsys.readouterr().out
        assert out.startswith("potential needless words in function name$$0$0$")

    def test_xcode_with_files(self, project, capsys):
        (project / "List.swift").write_text(SOURCE)
        assert _run(["-Xcode", "List.swift"]) == 0
        assert "List.swift:1:1: warning:" in capsys.readouterr().out

    def test_config_sets_defaults(self, project, capsys):
        (project / "needless.yaml").write_text("format: dollar\ndiff: true\n")
        assert _run([], "+" + SOURCE) == 0
        out = capsys.readouterr().out
        assert out.count("$") == 5

    def test_cli_overrides_config(self, project, capsys):
        (project / "needless.yaml").write_text("format: dollar\n")
        assert _run(["-Xcode"], SOURCE) == 0
        assert ":1:1: warning:" in capsys.readouterr().out

    def test_invalid_config(self, project):
        (project / "needless.yaml").write_text("format: json\n")
        assert _run([], SOURCE) == 1

    def test_config_with_mixed_type_keys(self, project, capsys):
        (project / "needless.yaml").write_text("1: a\nb: c\n")
        assert _run([], SOURCE) == 1
        assert "Unknown keys: 1, b" in capsys.readouterr().out

    def test_config_path_is_directory(self, project, capsys):
        (project / "cfgdir").mkdir()
        assert _run(["--config", "cfgdir"], SOURCE) == 1
        assert "cannot read" in capsys.readouterr().out

    def test_explicit_config(self, project, capsys):
        cfg = project / "cfg.yaml"
        cfg.write_text("format: xcode\n")
        assert _run(["--config", str(cfg)], SOURCE) == 0
        assert ":1:1: warning:" in capsys.readouterr().out

    def test_missing_file_exit_code(self, project):
        assert _run(["nope.swift"]) == 1

    def test_staged_uses_diff_mode(self, project, capsys):
        diff = "+func removeFromArray(_ array: Array) {}\n func removeFromList(_ list: List)\n"
        with patch("needless.cli.get_staged_diff", return_value=diff):
            assert _run(["--staged", "-dollar"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert lines[0].split("$")[3] == "1"

    def test_staged_rejects_files(self, project, capsys):
        with patch("needless.cli.get_staged_diff") as staged:
            assert _run(["--staged", "a.swift"]) == 2
        staged.assert_not_called()
        assert "cannot be combined with files" in capsys.readouterr().err

    def test_staged_with_explicit_diff_flag(self, project, capsys):
        diff = "+func removeFromArray(_ array: Array) {}\n"
        with patch("needless.cli.get_staged_diff", return_value=diff):
            assert _run(["--staged", "-diff", "-dollar"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 1

    def test_version(self, project, capsys):
        assert _run(["--version"]) == 0
        assert capsys.readouterr().out.startswith("needless ")

    def test_runs_as_module(self, project):
        import subprocess
        import sys

        env = dict(os.environ, PYTHONPATH=str(Path(__file__).resolve().parents[1]))
        result = subprocess.run(
            [sys.executable, "-m", "needless", "-dollar"],
            input=SOURCE, capture_output=True, text=True, env=env,
        )
        assert result.returncode == 0
        assert result.stdout.count("$") == 5
