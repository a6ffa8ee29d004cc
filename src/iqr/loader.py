# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Load integration manifests into ranked records."""

import json
import logging
from pathlib import Path
from typing import Any

from iqr.discovery import DEFAULT_EXCLUDE_PATTERNS, MANIFEST_FILENAME, find_manifests
from iqr.model import Record
from iqr.rank import UnknownValueError, calculate_rank

logger = logging.getLogger(__name__)

DEFAULT_QUALITY_SCALE = "no_score"
DEFAULT_IOT_CLASS = "unknown"


class ManifestError(RuntimeError):
    """Represent a manifest that cannot be turned into a record."""

    def __init__(self, manifest_path: Path, message: str) -> None:
        super().__init__(f"{manifest_path}: {message}")
        self.manifest_path = manifest_path


def coerce_config_flow(value: object) -> int:
    """Normalize a manifest ``config_flow`` value to ``1`` or ``0``.

    ``None``, ``False``, zero, the empty string and the string ``"0"`` are
    false; any other value, including empty lists and objects, is true.
    """
    if isinstance(value, str):
        return 0 if value in ("", "0") else 1
    if isinstance(value, (list, dict)):
        return 1
    return 1 if value else 0


def derive_component_path(root_path: Path, manifest_path: Path) -> str:
    """Return the component directory of a manifest relative to the scan root.

    Args:
        root_path: Scan root directory.
        manifest_path: Manifest file beneath ``root_path``.

    Returns:
        POSIX path without the root prefix and the manifest filename,
        e.g. ``homeassistant/components/hue/``.
    """
    relative_path = manifest_path.relative_to(root_path).as_posix()
    return relative_path.removesuffix(MANIFEST_FILENAME)


class ManifestLoader:
    """Discover, decode and rank manifests beneath a scan root."""

    def __init__(
        self,
        root_path: Path,
        exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> None:
        """Initialize loader.

        Args:
            root_path: Directory to scan.
            exclude_patterns: Gitignore-style patterns of paths to skip.
        """
        self._root_path = root_path
        self._exclude_patterns = exclude_patterns

    def load(self) -> list[Record]:
        """Build ranked records for all discovered manifests.

        Returns:
            Records in lexicographic manifest path order.

        Raises:
            ManifestError: If any manifest cannot be read, decoded or ranked.
        """
        manifest_paths = find_manifests(
            self._root_path, exclude_patterns=self._exclude_patterns
        )
        logger.info(
            f"Building manifest list (path={self._root_path} manifests={len(manifest_paths)})"
        )
        return [self._load_manifest(manifest_path) for manifest_path in manifest_paths]

    def _load_manifest(self, manifest_path: Path) -> Record:
        try:
            payload = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(manifest_path, f"cannot read manifest: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ManifestError(manifest_path, f"invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ManifestError(
                manifest_path,
                f"expected a JSON object, got {type(payload).__name__}",
            )
        try:
            return self.build_record(
                payload, path=derive_component_path(self._root_path, manifest_path)
            )
        except UnknownValueError as exc:
            raise ManifestError(manifest_path, str(exc)) from exc

    @staticmethod
    def build_record(payload: dict[str, Any], path: str) -> Record:
        """Build one fully-populated record from a decoded manifest.

        Args:
            payload: Decoded manifest object.
            path: Component path derived from the manifest location.

        Returns:
            Ranked record with defaults applied.

        Raises:
            UnknownValueError: If quality scale or IoT class are not known.
        """
        quality_scale = payload.get("quality_scale")
        if quality_scale is None:
            quality_scale = DEFAULT_QUALITY_SCALE
        iot_class = payload.get("iot_class")
        if iot_class is None:
            iot_class = DEFAULT_IOT_CLASS
        config_flow = coerce_config_flow(payload.get("config_flow"))
        raw_codeowners = payload.get("codeowners")
        codeowners = (
            tuple("" if owner is None else str(owner) for owner in raw_codeowners)
            if isinstance(raw_codeowners, list)
            else ()
        )
        documentation = payload.get("documentation")
        return Record(
            domain=_required_text(payload, "domain", path),
            name=_required_text(payload, "name", path),
            quality_scale=str(quality_scale),
            iot_class=str(iot_class),
            config_flow=config_flow,
            codeowners=codeowners,
            documentation=str(documentation) if documentation is not None else None,
            path=path,
            rank=calculate_rank(
                quality_scale=str(quality_scale),
                iot_class=str(iot_class),
                config_flow=config_flow,
                codeowners=codeowners,
            ),
        )


def _required_text(payload: dict[str, Any], field: str, path: str) -> str:
    value = payload.get(field)
    if isinstance(value, str):
        return value
    logger.warning(f"Manifest field is missing or not text (path={path} field={field})")
    return "" if value is None else str(value)
