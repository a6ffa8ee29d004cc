# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Report formatters for the integration quality ranker."""

from iqr.formatter import Formatter, OutputFormat
from iqr.formatters.csv import CsvFormatter
from iqr.formatters.dokuwiki import DokuWikiFormatter
from iqr.formatters.html import HtmlFormatter
from iqr.formatters.json import JsonFormatter
from iqr.formatters.text import TextFormatter

FORMATTERS: dict[OutputFormat, type[Formatter]] = {
    OutputFormat.TEXT: TextFormatter,
    OutputFormat.CSV: CsvFormatter,
    OutputFormat.JSON: JsonFormatter,
    OutputFormat.HTML: HtmlFormatter,
    OutputFormat.DOKUWIKI: DokuWikiFormatter,
}


def get_formatter(output_format: OutputFormat) -> Formatter:
    """Create the formatter for an output format."""
    return FORMATTERS[output_format]()


__all__ = [
    "CsvFormatter",
    "DokuWikiFormatter",
    "FORMATTERS",
    "HtmlFormatter",
    "JsonFormatter",
    "TextFormatter",
    "get_formatter",
]
