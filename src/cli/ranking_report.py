# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for ranking integrations by implementation quality."""

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from iqr.columns import COLUMN_NAMES, DEFAULT_COLUMNS, DEFAULT_SORT
from iqr.formatter import FormatterError, OutputFormat
from iqr.loader import ManifestError
from iqr.report import ReportOptions, build_report

logger = logging.getLogger(__name__)

STDOUT_OUTPUT = "-"

EPILOG = f"""\
output formats:
  {", ".join(output_format.value for output_format in OutputFormat)}

column names (default order):
  {DEFAULT_COLUMNS.replace(",", ", ")}

additional column names that can be used:
  {", ".join(name for name in COLUMN_NAMES if name not in DEFAULT_COLUMNS.split(","))}

default sort order (minus at the end means reverse sort):
  {DEFAULT_SORT.replace(",", ", ")}
"""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler on standard error.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="iqr-report",
        description="Generate a list of integrations ranked by implementation quality.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Source directory to scan (default: current directory).",
    )
    parser.add_argument(
        "--format",
        default=OutputFormat.TEXT.value,
        metavar="{" + ",".join(output_format.value for output_format in OutputFormat) + "}",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--sort",
        default=DEFAULT_SORT,
        help="Output sort order, comma-separated; a trailing '-' sorts descending.",
    )
    parser.add_argument(
        "--columns",
        default=DEFAULT_COLUMNS,
        help="Output columns, comma-separated.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Output file path; standard output when omitted or '-'.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code == 0:
            return 0
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2

    try:
        output_format = OutputFormat.parse(args.format)
    except FormatterError as exc:
        logger.warning(f"Invalid format argument (format={args.format})")
        stderr.write(f"{exc}\n")
        return 2

    root_path = Path(args.directory)
    if not root_path.is_dir():
        logger.warning(f"Path does not exist (path={root_path})")
        stderr.write(f"Path does not exist: {root_path}\n")
        return 2

    options = ReportOptions(
        root_path=root_path,
        output_format=output_format,
        sort=args.sort,
        columns=args.columns,
    )
    try:
        report = build_report(options)
    except ManifestError as exc:
        logger.warning(
            f"Failed to load manifest (path={exc.manifest_path} error={exc})"
        )
        stderr.write(f"Failed to load manifest: {exc}\n")
        return 2

    if args.output and args.output != STDOUT_OUTPUT:
        try:
            _write_report_file(report=report, output_path=Path(args.output))
        except OSError as exc:
            logger.warning(
                f"Failed to write report file (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write report file: {args.output}\n")
            return 2
    else:
        _write_report(report=report, stdout=stdout)
    return 0


def _write_report(report: str, stdout: TextIO) -> None:
    """Write the report to standard output.

    Args:
        report: Rendered report.
        stdout: Standard output stream.
    """
    stdout.write(report)


def _write_report_file(report: str, output_path: Path) -> None:
    """Write the report to an output file.

    Args:
        report: Rendered report.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    logger.info(f"Printing report (output_path={output_path})")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(report, encoding="utf-8")


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
