# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Formatter interfaces for rendering ranked records."""

import enum
from typing import Protocol

from iqr.model import ColumnValue, Record


class FormatterError(RuntimeError):
    """Represent an output format configuration failure."""


class OutputFormat(enum.Enum):
    """Supported report formats."""

    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    HTML = "html"
    DOKUWIKI = "dokuwiki"

    @classmethod
    def parse(cls, name: str) -> "OutputFormat":
        """Resolve a format name.

        Raises:
            FormatterError: If the name is not a supported format.
        """
        try:
            return cls(name)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise FormatterError(
                f"Unsupported format: {name} (supported: {supported})"
            ) from None


class Formatter(Protocol):
    """Render records as report text."""

    def render(self, records: list[Record], columns: list[str]) -> str:
        """Render records using only the given columns.

        Args:
            records: Records in display order.
            columns: Column names in display order.

        Returns:
            Complete report text.
        """


def display_value(value: ColumnValue, delimiter: str) -> str:
    """Convert a column value to display text.

    Args:
        value: Raw column value.
        delimiter: Separator used to join sequence values.

    Returns:
        Display text; missing values become the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, tuple):
        return delimiter.join(value)
    return str(value)
