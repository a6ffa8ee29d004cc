# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""JSON report formatter."""

import json

from iqr.model import Record

JSON_INDENT = 3


class JsonFormatter:
    """Render records as a pretty-printed JSON array with sorted keys.

    Code owners stay JSON arrays; missing values become ``null``.
    """

    def render(self, records: list[Record], columns: list[str]) -> str:
        payload = [record.project(columns) for record in records]
        return (
            json.dumps(payload, indent=JSON_INDENT, sort_keys=True, ensure_ascii=False)
            + "\n"
        )
