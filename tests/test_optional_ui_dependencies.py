"""Regression tests for the optional Rich dependency.

These tests verify every CLI path (help, version, summary, errors and
logging) still works with plain output when Rich is not importable.
"""

from __future__ import annotations

import logging
import sys

import pytest

from wacs_options.cli import exit_codes
from wacs_options.cli.app import cli, main
from wacs_options.cli.console import configure_logging, get_rich_console
from wacs_options.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--help"])
    assert code == exit_codes.SUCCESS
    out = capsys.readouterr().out
    assert " --validationmode:" in out
    assert " --sslipaddress:" in out


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--version"])
    assert code == exit_codes.SUCCESS
    assert "wacs-options" in capsys.readouterr().out


def test_summary_falls_back_to_plain_table(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--target", "manual", "--host", "a.example.com", "--webroot", "C:/www"])
    assert code == exit_codes.SUCCESS
    out = capsys.readouterr().out
    assert "Resolved options" in out
    assert "a.example.com" in out
    assert "Ignored (plugin not selected): --webroot" in out


def test_errors_render_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["wacs-options", "--target", "manual"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    err = capsys.readouterr().err
    assert "--host" in err
    assert "--target manual" in err


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging(verbose=True)
    logger = logging.getLogger("wacs_options")
    assert logger.level == logging.DEBUG
    assert any(type(h) is logging.StreamHandler for h in logger.handlers)

    configure_logging(verbose=False)
    assert logger.level == logging.WARNING
    assert len([h for h in logger.handlers if type(h) is logging.StreamHandler]) == 1
