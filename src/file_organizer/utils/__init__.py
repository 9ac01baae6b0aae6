"""Utility modules for file organizer."""

from .security import PathValidationError, SecurityUtils, resolve_in_workspace

__all__ = ["PathValidationError", "SecurityUtils", "resolve_in_workspace"]
