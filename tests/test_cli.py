"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from xmldoclet.cli import _build_parser, _split_doclet_args, main
from xmldoclet.logging import configure_logging


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "check"])
    assert args.verbose is True
    assert args.command == "check"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "--verbose"])
    assert args.verbose is True


def test_cli_filter_requires_model() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["filter"])


def test_split_doclet_args() -> None:
    assert _split_doclet_args(["check", "--", "-d", "out", "--"]) == (["check"], ["-d", "out", "--"])
    assert _split_doclet_args(["check"]) == (["check"], [])


def test_check_prints_configuration(capsys) -> None:
    main(["check", "--", "-d", "out", "-multiple", "-extends", "com.example.Base"])

    output = capsys.readouterr().out
    assert "Output directory: out" in output
    assert "Output mode: multiple files (flat)" in output
    assert "Extends filter: com.example.Base" in output


def test_check_fails_without_directory() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--", "-multiple"])
    assert excinfo.value.code == 1


def test_check_rejects_unknown_option(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--", "-d", "out", "-private"])
    assert excinfo.value.code == 1
    assert "Invalid flag: -private" in capsys.readouterr().err


def test_filter_prints_accepted_classes(tmp_path: Path, capsys) -> None:
    listing = tmp_path / "classes.yml"
    listing.write_text(
        """
classes:
  - name: com.example.Base
  - name: com.example.Widget
    extends: com.example.Base
  - name: com.example.Gadget
    extends: com.example.Widget
""",
        encoding="utf-8",
    )

    main(["filter", "--model", str(listing), "--", "-d", "out", "-extends", "com.example.Base"])

    assert capsys.readouterr().out.splitlines() == ["com.example.Widget"]


def test_filter_without_filters_lists_everything(tmp_path: Path, capsys) -> None:
    listing = tmp_path / "classes.yml"
    listing.write_text("classes:\n  - name: a.A\n  - name: a.B\n", encoding="utf-8")

    main(["filter", "--model", str(listing), "--", "-d", "out"])

    assert capsys.readouterr().out.splitlines() == ["a.A", "a.B"]


def test_check_prints_diagnostic_summary(capsys) -> None:
    main(["check", "--", "-d", "out", "-multiple", "-filename", "x.xml"])

    output = capsys.readouterr().out
    assert "0 error(s), 1 warning(s)" in output
    assert "Output mode: multiple files (flat)" in output


def test_check_without_diagnostics_omits_summary(capsys) -> None:
    main(["check", "--", "-d", "out"])

    assert "error(s)" not in capsys.readouterr().out


def test_log_file_receives_diagnostics(tmp_path: Path) -> None:
    log_file = tmp_path / "xmldoclet.log"

    main(["check", "--log-file", str(log_file), "--", "-d", "out", "-multiple", "-filename", "x.xml"])
    configure_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO xmldoclet.options: Output directory: out" in content
    assert "WARNING xmldoclet.options: '-filename' option ignored" in content


def test_log_file_option_before_command() -> None:
    args = _build_parser().parse_args(["--log-file", "run.log", "check"])

    assert args.log_file == Path("run.log")
