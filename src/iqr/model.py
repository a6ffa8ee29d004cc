# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for ranked integration manifests."""

from dataclasses import dataclass
from typing import Any

from iqr.columns import COLUMN_NAMES

ColumnValue = str | int | tuple[str, ...] | None


@dataclass(frozen=True)
class Record:
    """Represent one ranked integration manifest.

    Attributes:
        domain: Integration domain identifier.
        name: Human-readable integration name.
        quality_scale: Quality scale name, ``no_score`` when not declared.
        iot_class: IoT class name, ``unknown`` when not declared.
        config_flow: ``1`` when the integration offers a config flow, else ``0``.
        codeowners: Code owner handles in manifest order.
        documentation: Documentation URL; ``None`` when not declared.
        path: Scan-root-relative component directory, e.g.
            ``homeassistant/components/hue/``.
        rank: Rank computed from the fields above.
    """

    domain: str
    name: str
    quality_scale: str
    iot_class: str
    config_flow: int
    codeowners: tuple[str, ...]
    documentation: str | None
    path: str
    rank: int

    def value(self, column: str) -> ColumnValue:
        """Return the raw value of a column, ``None`` for unknown columns."""
        if column not in COLUMN_NAMES:
            return None
        return getattr(self, column)

    def project(self, columns: list[str]) -> dict[str, Any]:
        """Return the selected columns as a JSON-compatible mapping.

        Args:
            columns: Column names to select.

        Returns:
            Mapping of column name to value; sequences become lists.
        """
        projected: dict[str, Any] = {}
        for column in columns:
            value = self.value(column)
            projected[column] = list(value) if isinstance(value, tuple) else value
        return projected
