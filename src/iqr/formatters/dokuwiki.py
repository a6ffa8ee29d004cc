# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""DokuWiki table report formatter.

Cell values are not escaped, so ``|`` or ``^`` inside a value breaks the
table layout.
"""

from iqr.formatter import display_value
from iqr.model import Record

SEQUENCE_DELIMITER = ", "


class DokuWikiFormatter:
    """Render records as a DokuWiki table."""

    def render(self, records: list[Record], columns: list[str]) -> str:
        lines = ["", "^" + "^".join(columns) + "^"]
        for record in records:
            cells = [
                display_value(record.value(column), SEQUENCE_DELIMITER)
                for column in columns
            ]
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines)
