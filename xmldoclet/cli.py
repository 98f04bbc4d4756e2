"""CLI entrypoints for checking doclet options and previewing class filters."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from .config import build_configuration
from .logging import configure_logging
from .models import ModelError, load_model
from .options import OptionError, split_options
from .reporting import LoggingReporter

_USAGE_EPILOG = (
    "Doclet options follow a literal '--', for example: "
    "xmldoclet check -- -d out -multiple -extends com.example.Base"
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write diagnostics to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmldoclet",
        description="Validate XML doclet options and preview class filters.",
        epilog=_USAGE_EPILOG,
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate doclet options and print the resulting configuration.",
        epilog=_USAGE_EPILOG,
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_log_file_option(check_parser, suppress_default=True)

    filter_parser = subparsers.add_parser(
        "filter",
        help="List the classes of a YAML class listing accepted by the filters.",
        epilog=_USAGE_EPILOG,
    )
    _add_verbose_option(filter_parser, suppress_default=True)
    _add_log_file_option(filter_parser, suppress_default=True)
    filter_parser.add_argument(
        "--model",
        required=True,
        type=Path,
        help="YAML file describing the classes to filter.",
    )

    return parser


def _split_doclet_args(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    arguments = list(argv)
    if "--" not in arguments:
        return arguments, []
    index = arguments.index("--")
    return arguments[:index], arguments[index + 1 :]


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for xmldoclet commands."""
    tool_args, doclet_args = _split_doclet_args(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(tool_args)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        matrix = split_options(doclet_args)
    except OptionError as exc:
        parser.exit(1, f"{exc}\n")

    reporter = LoggingReporter()
    config = build_configuration(matrix, reporter)
    if config is None:
        parser.exit(1, "xmldoclet: invalid doclet options\nRun with --verbose for more details.\n")

    if args.command == "check":
        for line in config.describe():
            print(line)
        if reporter.warning_count or reporter.error_count:
            print(f"{reporter.error_count} error(s), {reporter.warning_count} warning(s)")
    elif args.command == "filter":
        try:
            classes = load_model(args.model)
        except ModelError as exc:
            parser.exit(1, f"{exc}\n")
        filtering = config.has_filter()
        for doc in classes:
            if not filtering or config.filter(doc):
                print(doc.qualified_name())
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
