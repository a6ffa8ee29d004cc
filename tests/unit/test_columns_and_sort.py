# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from iqr.columns import COLUMN_NAMES, is_valid_column, parse_columns
from iqr.model import Record
from iqr.sorter import SortKey, parse_sort_keys, sort_records


def _record(**overrides: object) -> Record:
    values: dict[str, object] = {
        "domain": "demo",
        "name": "Demo",
        "quality_scale": "no_score",
        "iot_class": "unknown",
        "config_flow": 0,
        "codeowners": (),
        "documentation": None,
        "path": "components/demo/",
        "rank": 1,
    }
    values.update(overrides)
    return Record(**values)  # type: ignore[arg-type]


def test_col_001_parse_columns_drops_unknown_and_keeps_order() -> None:
    assert parse_columns("rank, bogus, name") == ["rank", "name"]


def test_col_002_parse_columns_strips_inner_whitespace_and_empty_entries() -> None:
    assert parse_columns(" iot _class ,,path ,") == ["iot_class", "path"]


def test_col_003_suffixed_names_are_valid_columns() -> None:
    for name in COLUMN_NAMES:
        assert is_valid_column(name)
        assert is_valid_column(f"{name}-")
    assert not is_valid_column("")
    assert not is_valid_column("rank+")
    assert parse_columns("rank-,name") == ["rank-", "name"]


def test_sort_001_parse_sort_keys_reads_direction_suffix() -> None:
    assert parse_sort_keys("rank-, name, bogus-") == [
        SortKey(column="rank", descending=True),
        SortKey(column="name", descending=False),
    ]


def test_sort_002_rank_descending_ties_broken_by_name() -> None:
    records = [
        _record(name="b", rank=10),
        _record(name="a", rank=10),
        _record(name="c", rank=5),
    ]

    ordered = sort_records(records, "rank-,name")

    assert [record.name for record in ordered] == ["a", "b", "c"]
    assert [record.name for record in records] == ["b", "a", "c"]


def test_sort_003_rank_is_compared_numerically() -> None:
    records = [_record(name="x", rank=9), _record(name="y", rank=10)]

    ordered = sort_records(records, "rank")

    assert [record.rank for record in ordered] == [9, 10]


def test_sort_004_text_columns_compare_as_strings() -> None:
    records = [
        _record(domain="b", config_flow=1),
        _record(domain="a", config_flow=0),
        _record(domain="c", config_flow=1),
    ]

    ordered = sort_records(records, "config_flow-,domain-")

    assert [record.domain for record in ordered] == ["c", "b", "a"]


def test_sort_005_missing_documentation_sorts_first_ascending() -> None:
    records = [
        _record(name="with", documentation="https://example.org"),
        _record(name="without", documentation=None),
    ]

    ordered = sort_records(records, "documentation")

    assert [record.name for record in ordered] == ["without", "with"]


def test_sort_006_descending_sort_is_stable_for_equal_values() -> None:
    records = [
        _record(name="first", rank=3),
        _record(name="second", rank=3),
        _record(name="third", rank=7),
    ]

    ordered = sort_records(records, "rank-")

    assert [record.name for record in ordered] == ["third", "first", "second"]


def test_sort_007_unknown_keys_only_keep_input_order() -> None:
    records = [_record(name="b"), _record(name="a")]

    ordered = sort_records(records, "bogus,also-bogus")

    assert ordered == records
    assert ordered is not records


def test_sort_008_codeowners_sort_on_joined_handles() -> None:
    records = [
        _record(name="x", codeowners=("@zed",)),
        _record(name="y", codeowners=("@amy", "@org/team")),
    ]

    ordered = sort_records(records, [SortKey(column="codeowners")])

    assert [record.name for record in ordered] == ["y", "x"]
