"""
Engine Configuration

Tunables for the layout engine. Defaults match the editor's behavior; a YAML
file can override them:

```yaml
min_rows: 4
max_history: 50
default_cols: 12
default_gap: 16
default_preset: grid-2x2
```

The file is taken from the `path` argument, else from the GLASSGRID_CONFIG
environment variable, else defaults are used.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GLASSGRID_CONFIG"


class ConfigError(ValueError):
    """Raised for unreadable or invalid engine configuration."""


@dataclass
class EngineConfig:
    """Layout engine settings."""

    # Floor for the auto-fitted row count
    min_rows: int = 4

    # Snapshots retained by the undo history
    max_history: int = 50

    # Used when the engine creates a blank grid
    default_cols: int = 12
    default_gap: int = 16

    default_preset: str = "grid-2x2"

    def validate(self):
        """Raise ConfigError if any value is out of range."""
        for name in ("min_rows", "max_history", "default_cols"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if (not isinstance(self.default_gap, int) or isinstance(self.default_gap, bool)
                or self.default_gap < 0):
            raise ConfigError(f"default_gap must be a non-negative integer, got {self.default_gap!r}")
        if not isinstance(self.default_preset, str) or not self.default_preset:
            raise ConfigError("default_preset must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        config = cls(**data)
        config.validate()
        return config


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Load engine configuration.

    Args:
        path: YAML file. If None, GLASSGRID_CONFIG is consulted.

    Returns:
        EngineConfig (defaults when no file is configured)

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return EngineConfig()

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    config = EngineConfig.from_dict(data)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
