# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Multi-key, direction-aware record sorting."""

import logging
from dataclasses import dataclass

from iqr.columns import DESCENDING_SUFFIX, NUMERIC_COLUMNS, parse_columns
from iqr.model import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortKey:
    """Represent one sort criterion.

    Attributes:
        column: Registry column name without direction suffix.
        descending: Whether larger values come first.
    """

    column: str
    descending: bool = False

    @property
    def numeric(self) -> bool:
        return self.column in NUMERIC_COLUMNS


def parse_sort_keys(spec: str) -> list[SortKey]:
    """Parse a comma-separated sort specification.

    Args:
        spec: Column names, each optionally suffixed with ``-`` for
            descending order, e.g. ``"rank-,name"``.

    Returns:
        Sort keys in priority order; unknown names are dropped.
    """
    keys: list[SortKey] = []
    for column in parse_columns(spec):
        if column.endswith(DESCENDING_SUFFIX):
            keys.append(SortKey(column=column[: -len(DESCENDING_SUFFIX)], descending=True))
        else:
            keys.append(SortKey(column=column))
    return keys


def sort_records(records: list[Record], sort_spec: str | list[SortKey]) -> list[Record]:
    """Return records ordered by the given sort keys.

    Keys are applied from lowest to highest priority with a stable sort, so
    ties on one key keep the order established by the keys after it.

    Args:
        records: Records to order; not modified.
        sort_spec: Sort specification string or parsed sort keys.

    Returns:
        New list of records in sorted order.
    """
    keys = parse_sort_keys(sort_spec) if isinstance(sort_spec, str) else sort_spec
    logger.info(
        "Sorting manifest list (keys="
        + ", ".join(f"{key.column}{DESCENDING_SUFFIX if key.descending else ''}" for key in keys)
        + ")"
    )
    ordered = list(records)
    for key in reversed(keys):
        if key.numeric:
            ordered = sorted(
                ordered,
                key=lambda record, column=key.column: _numeric_value(record, column),
                reverse=key.descending,
            )
        else:
            ordered = sorted(
                ordered,
                key=lambda record, column=key.column: _text_value(record, column),
                reverse=key.descending,
            )
    return ordered


def _numeric_value(record: Record, column: str) -> int:
    value = record.value(column)
    return value if isinstance(value, int) else 0


def _text_value(record: Record, column: str) -> str:
    value = record.value(column)
    if value is None:
        return ""
    if isinstance(value, tuple):
        return ", ".join(value)
    return str(value)
