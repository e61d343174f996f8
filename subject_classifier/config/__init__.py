"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_FORMATS = {"text", "json"}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    format: str = "text"
    show_icon: bool = True
    show_scope: bool = True
    strict: bool = False
    max_description_length: int = 0  # 0 disables truncation

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.format not in VALID_FORMATS:
            warnings.append(f"Invalid format '{self.format}', using '{defaults.format}'")
            self.format = defaults.format

        for name in ("show_icon", "show_scope", "strict"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                default = getattr(defaults, name)
                warnings.append(f"Invalid {name} '{value}', using {str(default).lower()}")
                setattr(self, name, default)

        length = self.max_description_length
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            warnings.append(f"Invalid max_description_length '{length}', using {defaults.max_description_length}")
            self.max_description_length = defaults.max_description_length

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Locates and loads the .scrc configuration."""

    CONFIG_FILENAME = ".scrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "VALID_FORMATS",
]
