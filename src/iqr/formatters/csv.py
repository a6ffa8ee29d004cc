# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CSV report formatter."""

import csv
import io

from iqr.formatter import display_value
from iqr.model import Record

SEQUENCE_DELIMITER = ";"


class CsvFormatter:
    """Render a header row plus one row per record."""

    def render(self, records: list[Record], columns: list[str]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(columns)
        for record in records:
            writer.writerow(
                [
                    display_value(record.value(column), SEQUENCE_DELIMITER)
                    for column in columns
                ]
            )
        return buffer.getvalue()
