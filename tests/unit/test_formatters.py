# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import csv
import io
import json

import pytest

from iqr.formatter import FormatterError, OutputFormat
from iqr.formatters import (
    CsvFormatter,
    DokuWikiFormatter,
    HtmlFormatter,
    JsonFormatter,
    TextFormatter,
    get_formatter,
)
from iqr.model import Record


def _records() -> list[Record]:
    return [
        Record(
            domain="hue",
            name="Philips Hue",
            quality_scale="platinum",
            iot_class="local_push",
            config_flow=1,
            codeowners=("@balloob", "@home-assistant/matter"),
            documentation="https://www.home-assistant.io/integrations/hue",
            path="homeassistant/components/hue/",
            rank=70,
        ),
        Record(
            domain="odd",
            name='Odd, "quoted" <b>name</b>',
            quality_scale="no_score",
            iot_class="unknown",
            config_flow=0,
            codeowners=(),
            documentation=None,
            path="homeassistant/components/odd/",
            rank=1,
        ),
    ]


def test_fmt_001_output_format_parse_rejects_unknown_names() -> None:
    assert OutputFormat.parse("dokuwiki") is OutputFormat.DOKUWIKI
    with pytest.raises(FormatterError, match="Unsupported format: yaml"):
        OutputFormat.parse("yaml")


def test_fmt_002_every_output_format_has_a_formatter() -> None:
    for output_format in OutputFormat:
        formatter = get_formatter(output_format)
        assert isinstance(formatter.render([], ["rank"]), str)


def test_fmt_003_text_formatter_renders_labeled_blocks() -> None:
    report = TextFormatter().render(_records(), ["rank", "codeowners", "documentation"])

    assert report == (
        "Rank:          70\n"
        "Code owners:   @balloob, @home-assistant/matter\n"
        "Documentation: https://www.home-assistant.io/integrations/hue\n"
        "\n"
        "Rank:          1\n"
        "Code owners:   \n"
        "Documentation: \n"
    )


def test_fmt_004_json_round_trip_matches_projection() -> None:
    records = _records()
    columns = ["rank", "name", "codeowners", "documentation", "config_flow"]

    decoded = json.loads(JsonFormatter().render(records, columns))

    assert decoded == [record.project(columns) for record in records]
    assert decoded[0]["codeowners"] == ["@balloob", "@home-assistant/matter"]
    assert decoded[1]["documentation"] is None


def test_fmt_005_json_keys_are_sorted() -> None:
    report = JsonFormatter().render(_records()[:1], ["rank", "domain", "name"])

    assert report.index('"domain"') < report.index('"name"') < report.index('"rank"')
    assert report.endswith("]\n")


def test_fmt_006_csv_round_trips_delimiters_and_quotes() -> None:
    records = _records()
    columns = ["name", "codeowners", "rank"]

    rows = list(csv.reader(io.StringIO(CsvFormatter().render(records, columns))))

    assert rows == [
        ["name", "codeowners", "rank"],
        ["Philips Hue", "@balloob;@home-assistant/matter", "70"],
        ['Odd, "quoted" <b>name</b>', "", "1"],
    ]


def test_fmt_007_html_escapes_values_links_urls_and_alternates_rows() -> None:
    report = HtmlFormatter().render(_records(), ["name", "documentation", "codeowners"])

    assert report.startswith("<!DOCTYPE html>")
    assert "<tr><th>name</th><th>documentation</th><th>codeowners</th></tr>" in report
    assert (
        '<a href="https://www.home-assistant.io/integrations/hue">'
        "https://www.home-assistant.io/integrations/hue</a>"
    ) in report
    assert "Odd, &quot;quoted&quot; &lt;b&gt;name&lt;/b&gt;" in report
    assert "<b>name</b>" not in report
    assert '<td>@balloob, @home-assistant/matter</td>' in report
    assert report.index('<tr class="odd">') < report.index('<tr class="even">')
    assert report.rstrip().endswith("</html>")


def test_fmt_008_dokuwiki_renders_unescaped_table() -> None:
    report = DokuWikiFormatter().render(_records(), ["rank", "domain", "codeowners"])

    assert report == (
        "\n"
        "^rank^domain^codeowners^\n"
        "|70|hue|@balloob, @home-assistant/matter|\n"
        "|1|odd||"
    )


def test_fmt_009_suffixed_columns_render_as_empty() -> None:
    records = _records()[:1]

    assert DokuWikiFormatter().render(records, ["rank-"]) == "\n^rank-^\n||"
    assert json.loads(JsonFormatter().render(records, ["rank-"])) == [{"rank-": None}]


def test_fmt_010_empty_record_list_renders_empty_reports() -> None:
    assert TextFormatter().render([], ["rank"]) == ""
    assert json.loads(JsonFormatter().render([], ["rank"])) == []
    assert CsvFormatter().render([], ["rank", "name"]) == "rank,name\n"
