# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""HTML report formatter with a client-side sortable table."""

import html

from iqr.formatter import display_value
from iqr.model import Record

SEQUENCE_DELIMITER = ", "
LINK_PREFIX = "https://"
REPORT_TITLE = "Home Assistant integrations ranked by implementation quality"

_DOCUMENT_HEAD = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{REPORT_TITLE}</title>
<style>
table.tablesorter {{
 border: thin solid black;
}}

table.tablesorter thead {{
 background-color: #EEE;
}}

table.tablesorter thead th {{
 font-weight: bold;
 cursor: pointer;
}}

table.tablesorter tbody td {{
 vertical-align: top;
 padding-left: 0.25em;
 padding-right: 0.25em;
 padding-bottom: 0.125em;
 white-space: nowrap;
}}

table.tablesorter tbody tr.even {{
 background-color: #eee;
}}

table.tablesorter tbody tr.odd {{
 background-color: #fff;
}}
</style>
</head>
<body>
<h1>{REPORT_TITLE}</h1>
<p>Rank is calculated by quality index plus codeowners (two for each team) multiplied by IoT class index and config flow index.</p>
<p>You can click the table headers to order by that column.</p>
<table class="tablesorter">
<thead>"""

_TABLE_BODY_START = """</thead>
<tbody>"""

_DOCUMENT_TAIL = """</tbody>
</table>
<script src="https://cdnjs.cloudflare.com/ajax/libs/jquery/3.7.1/jquery.min.js"></script>
<script src="https://cdnjs.cloudflare.com/ajax/libs/jquery.tablesorter/2.31.3/js/jquery.tablesorter.min.js"></script>
<script>
$(document).ready(function() {
    $("table.tablesorter").tablesorter();
});
</script>
</body>
</html>
"""


class HtmlFormatter:
    """Render records as a standalone HTML document."""

    def render(self, records: list[Record], columns: list[str]) -> str:
        lines = [_DOCUMENT_HEAD, self._render_header(columns), _TABLE_BODY_START]
        for position, record in enumerate(records):
            lines.append(self._render_row(record, columns, position))
        lines.append(_DOCUMENT_TAIL)
        return "\n".join(lines)

    def _render_header(self, columns: list[str]) -> str:
        cells = "".join(f"<th>{html.escape(column)}</th>" for column in columns)
        return f"<tr>{cells}</tr>"

    def _render_row(self, record: Record, columns: list[str], position: int) -> str:
        row_class = "even" if position % 2 else "odd"
        cells = "".join(
            f"<td>{render_cell(display_value(record.value(column), SEQUENCE_DELIMITER))}</td>"
            for column in columns
        )
        return f'<tr class="{row_class}">{cells}</tr>'


def render_cell(value: str) -> str:
    """Escape a cell value, linking values that start with ``https://``."""
    escaped = html.escape(value)
    if value.startswith(LINK_PREFIX):
        return f'<a href="{escaped}">{escaped}</a>'
    return escaped
