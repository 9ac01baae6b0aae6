"""
Security utilities for workspace paths.

Directory names and subpaths arrive from callers such as a web backend, so
they are normalized and kept inside the workspace before use.
"""

import posixpath
import re
from pathlib import Path
from typing import Optional

from ..exceptions import FileOrganizerError


class PathValidationError(FileOrganizerError, ValueError):
    """Raised when path validation fails."""
    pass


_LEADING_PARENT_REFS = re.compile(r'^(\.\.(/|\\|$))+')


class SecurityUtils:
    """Path sanitization for names relative to a workspace."""

    @staticmethod
    def sanitize_relative_path(name: Optional[str], allow_empty: bool = False) -> str:
        """
        Normalize a relative path and strip attempts to leave the workspace.

        Leading ``../`` segments and leading separators are removed.

        Args:
            name: Raw directory name or subpath
            allow_empty: Whether an empty result (the workspace itself) is fine

        Returns:
            Normalized relative path, ``""`` for the workspace root

        Raises:
            PathValidationError: If the path contains null bytes, still
                refers to a parent directory, or is empty when not allowed
        """
        raw = (name or "").strip()

        if '\x00' in raw:
            raise PathValidationError("Path contains null bytes")

        normalized = posixpath.normpath(raw) if raw else ""
        normalized = _LEADING_PARENT_REFS.sub('', normalized)
        normalized = normalized.lstrip('/\\')
        if normalized == '.':
            normalized = ""

        if any(part == '..' for part in re.split(r'[/\\]', normalized)):
            raise PathValidationError(f"Path contains parent directory references: {name}")

        if not normalized and not allow_empty:
            raise PathValidationError("Path cannot be empty")

        return normalized

    @staticmethod
    def is_within(path: Path, base_path: Path) -> bool:
        """Check that ``path`` resolves inside ``base_path``."""
        try:
            return path.resolve().is_relative_to(base_path.resolve())
        except OSError as e:
            raise PathValidationError(f"Cannot resolve path: {e}")


def resolve_in_workspace(workspace: Path, name: Optional[str], allow_empty: bool = False) -> Path:
    """
    Join a sanitized relative path onto the workspace.

    Raises:
        PathValidationError: If the name is unsafe or escapes the workspace
    """
    relative = SecurityUtils.sanitize_relative_path(name, allow_empty=allow_empty)
    target = workspace / relative if relative else workspace
    if not SecurityUtils.is_within(target, workspace):
        raise PathValidationError(f"Path escapes workspace: {name}")
    return target
