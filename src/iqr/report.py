# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Report pipeline: load, sort and format ranked records."""

import logging
from dataclasses import dataclass
from pathlib import Path

from iqr.columns import DEFAULT_COLUMNS, DEFAULT_SORT, parse_columns
from iqr.discovery import DEFAULT_EXCLUDE_PATTERNS
from iqr.formatter import OutputFormat
from iqr.formatters import get_formatter
from iqr.loader import ManifestLoader
from iqr.sorter import sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportOptions:
    """Describe all values needed to produce one report.

    Attributes:
        root_path: Directory scanned for manifests.
        output_format: Report format.
        sort: Comma-separated sort specification.
        columns: Comma-separated output column list.
        exclude_patterns: Gitignore-style patterns of paths to skip.
    """

    root_path: Path
    output_format: OutputFormat = OutputFormat.TEXT
    sort: str = DEFAULT_SORT
    columns: str = DEFAULT_COLUMNS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS


def build_report(options: ReportOptions) -> str:
    """Produce the complete report text.

    Args:
        options: Report options.

    Returns:
        Rendered report.

    Raises:
        ManifestError: If any manifest cannot be read, decoded or ranked.
    """
    formatter = get_formatter(options.output_format)
    records = ManifestLoader(
        options.root_path, exclude_patterns=options.exclude_patterns
    ).load()
    sorted_records = sort_records(records, options.sort)
    columns = parse_columns(options.columns)
    logger.info(
        f"Formatting manifest list (format={options.output_format.value} columns={', '.join(columns)})"
    )
    return formatter.render(sorted_records, columns)
