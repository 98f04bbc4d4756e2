"""Tests for diagnostic reporters."""

from __future__ import annotations

import logging

from xmldoclet.reporting import ERROR, NOTICE, WARNING, CollectingReporter, LoggingReporter

_LOGGER = "tests.reporting"


def test_logging_reporter_maps_channels_to_levels(caplog) -> None:
    reporter = LoggingReporter(logging.getLogger(_LOGGER))

    with caplog.at_level(logging.DEBUG, logger=_LOGGER):
        reporter.notice("Output directory: out")
        reporter.warning("'-filename' option ignored")
        reporter.error("Output directory not specified; use -d <directory>")

    assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
        (logging.INFO, "Output directory: out"),
        (logging.WARNING, "'-filename' option ignored"),
        (logging.ERROR, "Output directory not specified; use -d <directory>"),
    ]


def test_logging_reporter_counts_errors_and_warnings(caplog) -> None:
    reporter = LoggingReporter(logging.getLogger(_LOGGER))

    with caplog.at_level(logging.INFO, logger=_LOGGER):
        reporter.notice("a")
        reporter.notice("b")
        reporter.warning("c")
        reporter.error("d")
        reporter.error("e")

    assert reporter.error_count == 2
    assert reporter.warning_count == 1


def test_logging_reporter_defaults_to_options_logger() -> None:
    assert LoggingReporter().logger.name == "xmldoclet.options"


def test_collecting_reporter_keeps_order() -> None:
    reporter = CollectingReporter()
    reporter.warning("w")
    reporter.notice("n")
    reporter.error("e")

    assert reporter.records == [(WARNING, "w"), (NOTICE, "n"), (ERROR, "e")]
    assert reporter.errors == ["e"]
    assert reporter.warnings == ["w"]
    assert reporter.notices == ["n"]
