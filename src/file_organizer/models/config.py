"""Configuration model for file organizer."""

from pathlib import Path
from typing import Any, Dict, Optional
import json
from dataclasses import dataclass, fields, replace

from ..exceptions import ConfigurationError


@dataclass
class OrganizerConfig:
    """Settings for a single organize or populate run."""
    assets_root: Optional[Path] = None
    max_files_per_category: Optional[int] = None
    max_operations: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.assets_root is not None and not isinstance(self.assets_root, Path):
            self.assets_root = Path(self.assets_root)
        for name in ('max_files_per_category', 'max_operations'):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or value <= 0):
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

    def with_overrides(self, **overrides: Any) -> "OrganizerConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'assets_root': str(self.assets_root) if self.assets_root else None,
            'max_files_per_category': self.max_files_per_category,
            'max_operations': self.max_operations,
            'seed': self.seed,
        }


def load_config(config_path: Path) -> OrganizerConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration {config_path}: {e}")

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration {config_path} must be a JSON object")

    known = {f.name for f in fields(OrganizerConfig)}
    unknown = sorted(set(config_data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return OrganizerConfig(**config_data)


def save_config(config: OrganizerConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
