# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Manifest file discovery beneath a scan root."""

import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "tests/",
    "**/script/scaffold/templates/",
)


class ExcludeMatcher:
    """Match scan-root-relative paths against gitignore-style exclude patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_patterns(cls, patterns: tuple[str, ...]) -> "ExcludeMatcher":
        """Build matcher from gitignore-style pattern lines.

        Args:
            patterns: Pattern lines, e.g. ``"tests/"``.

        Returns:
            Configured exclude matcher.
        """
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    def matches(self, relative_path: str) -> bool:
        """Check whether a file path should be excluded.

        Args:
            relative_path: Scan-root-relative file path.

        Returns:
            True when the path is excluded.
        """
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        return self._spec.match_file(normalized)


def find_manifests(
    root_path: Path,
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS,
) -> list[Path]:
    """Find readable manifest files beneath a root directory.

    Args:
        root_path: Directory to scan recursively.
        exclude_patterns: Gitignore-style patterns of paths to skip.

    Returns:
        Manifest paths sorted lexicographically by their string form.
    """
    matcher = ExcludeMatcher.from_patterns(exclude_patterns)
    manifests: list[Path] = []
    for candidate in root_path.rglob(f"*{MANIFEST_FILENAME}"):
        if not candidate.is_file():
            continue
        relative_path = candidate.relative_to(root_path).as_posix()
        if matcher.matches(relative_path):
            logger.debug(f"Skipping excluded manifest (path={relative_path})")
            continue
        if not os.access(candidate, os.R_OK):
            logger.debug(f"Skipping unreadable manifest (path={relative_path})")
            continue
        manifests.append(candidate)
    return sorted(manifests, key=str)
