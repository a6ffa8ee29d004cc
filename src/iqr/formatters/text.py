# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plain text report formatter."""

from iqr.formatter import display_value
from iqr.model import Record

LABEL_WIDTH = 14
SEQUENCE_DELIMITER = ", "

TEXT_LABELS: dict[str, str] = {
    "rank": "Rank:",
    "domain": "Domain:",
    "name": "Name:",
    "quality_scale": "Quality:",
    "iot_class": "IoT class:",
    "config_flow": "Config flow:",
    "codeowners": "Code owners:",
    "documentation": "Documentation:",
    "path": "Code path:",
}


class TextFormatter:
    """Render one labeled block per record."""

    def render(self, records: list[Record], columns: list[str]) -> str:
        return "\n".join(self._render_record(record, columns) for record in records)

    def _render_record(self, record: Record, columns: list[str]) -> str:
        lines = []
        for column in columns:
            label = TEXT_LABELS.get(column, f"{column}:").ljust(LABEL_WIDTH)
            value = display_value(record.value(column), SEQUENCE_DELIMITER)
            lines.append(f"{label} {value}\n")
        return "".join(lines)
