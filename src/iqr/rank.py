# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Integration rank calculation."""

from collections.abc import Iterable

QUALITY_SCALE_INDEX: dict[str, int] = {
    "no_score": 1,
    "silver": 2,
    "gold": 3,
    "platinum": 4,
    "internal": 5,
}

IOT_CLASS_INDEX: dict[str, int] = {
    "unknown": 1,
    "calculated": 1,
    "assumed_state": 1,
    "cloud_polling": 2,
    "cloud_push": 3,
    "local_polling": 4,
    "local_push": 5,
}

TEAM_SEPARATOR = "/"


class UnknownValueError(ValueError):
    """Represent a classification value missing from its index table."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Unknown {field} value: {value!r}")
        self.field = field
        self.value = value


def quality_index(quality_scale: str) -> int:
    """Return the ordinal index of a quality scale.

    Raises:
        UnknownValueError: If the quality scale is not known.
    """
    try:
        return QUALITY_SCALE_INDEX[quality_scale]
    except KeyError:
        raise UnknownValueError("quality_scale", quality_scale) from None


def iot_class_index(iot_class: str) -> int:
    """Return the index of an IoT class.

    Raises:
        UnknownValueError: If the IoT class is not known.
    """
    try:
        return IOT_CLASS_INDEX[iot_class]
    except KeyError:
        raise UnknownValueError("iot_class", iot_class) from None


def codeowners_index(codeowners: Iterable[str]) -> int:
    """Weigh code owners: two points per team handle, one per individual."""
    return sum(2 if TEAM_SEPARATOR in owner else 1 for owner in codeowners)


def config_flow_index(config_flow: int) -> int:
    return 2 if config_flow else 1


def calculate_rank(
    quality_scale: str,
    iot_class: str,
    config_flow: int,
    codeowners: Iterable[str],
) -> int:
    """Calculate the rank of one integration.

    The rank is ``(quality + codeowners) * iot_class * config_flow`` using the
    index tables of this module.

    Args:
        quality_scale: Quality scale name.
        iot_class: IoT class name.
        config_flow: ``1`` when the integration has a config flow, else ``0``.
        codeowners: Code owner handles.

    Returns:
        Integer rank; higher is better.

    Raises:
        UnknownValueError: If quality scale or IoT class are not known.
    """
    return (
        (quality_index(quality_scale) + codeowners_index(codeowners))
        * iot_class_index(iot_class)
        * config_flow_index(config_flow)
    )
