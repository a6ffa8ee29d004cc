# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Column registry shared by sort keys and output column lists."""

import logging

logger = logging.getLogger(__name__)

COLUMN_NAMES: tuple[str, ...] = (
    "rank",
    "domain",
    "name",
    "quality_scale",
    "iot_class",
    "config_flow",
    "codeowners",
    "documentation",
    "path",
)
NUMERIC_COLUMNS: frozenset[str] = frozenset({"rank"})
DESCENDING_SUFFIX = "-"

DEFAULT_COLUMNS = (
    "rank,name,domain,quality_scale,iot_class,config_flow,documentation,codeowners"
)
DEFAULT_SORT = "rank-,name"

_VALID_COLUMNS: frozenset[str] = frozenset(
    [*COLUMN_NAMES, *(f"{name}{DESCENDING_SUFFIX}" for name in COLUMN_NAMES)]
)


def is_valid_column(name: str) -> bool:
    """Check whether a column name is known.

    Names carrying the descending suffix are accepted as well.

    Args:
        name: Column name with whitespace already removed.

    Returns:
        True when the name is part of the registry.
    """
    if not name:
        return False
    return name in _VALID_COLUMNS


def parse_columns(spec: str) -> list[str]:
    """Parse a comma-separated column list.

    Whitespace is removed from every entry and unknown entries are dropped
    without raising; the remaining names keep their relative order.

    Args:
        spec: Comma-separated column names, e.g. ``"rank-, name"``.

    Returns:
        Valid column names in requested order.
    """
    tokens = ["".join(part.split()) for part in spec.split(",")]
    columns = [token for token in tokens if is_valid_column(token)]
    dropped = [token for token in tokens if token and not is_valid_column(token)]
    if dropped:
        logger.debug(f"Ignoring unknown columns (columns={', '.join(dropped)})")
    return columns
