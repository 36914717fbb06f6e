"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, config_from_dict, get_default_config

PROJECT_ROOT = Path(__file__).parent.parent.parent


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = PROJECT_ROOT / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load file-based configuration overrides."""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. settings.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge all tiers and return a typed configuration."""
        return config_from_dict(self.merge_config(overrides))

    def resolve_location(self, location: str) -> str:
        """Resolve a relative source path against the project root; URLs pass through."""
        if location.startswith(("http://", "https://")):
            return location

        path = Path(location)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return str(path)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
