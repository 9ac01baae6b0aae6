"""Data models for file organizer."""

from .category import Category, FillRule, FileTypePolicy
from .config import OrganizerConfig, load_config, save_config

__all__ = ["Category", "FillRule", "FileTypePolicy", "OrganizerConfig", "load_config", "save_config"]
