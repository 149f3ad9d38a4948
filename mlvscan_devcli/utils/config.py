"""Configuration loader for the MLVScan developer CLI."""
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_ENV_VAR = "MLVSCAN_CONFIG"
LOCAL_CONFIG_NAME = "mlvscan.yaml"


class ConfigError(Exception):
    """Raised when an explicitly requested config file cannot be used."""


def _get_config_dir() -> Path:
    """Get the packaged config directory path."""
    return Path(__file__).parent.parent / "config"


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("top-level YAML value must be a mapping")
    return data


class Config:
    """Configuration values loaded from a YAML file."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, source: Optional[Path] = None):
        self._config: Dict[str, Any] = data or {}
        self.source = source

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load a config file, raising ConfigError if it is unusable."""
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        try:
            return cls(_read_yaml(path), source=path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not load config {path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key."""
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def engine_command(self) -> Optional[Any]:
        """Command line of an external scan engine."""
        return self.get("engine.command")

    @property
    def engine_developer_flag(self) -> Optional[str]:
        """Argument asking the engine for developer guidance."""
        return self.get("engine.developer_flag")

    @property
    def engine_module(self) -> Optional[str]:
        """Python scan engine as 'module:attribute'."""
        return self.get("engine.module")

    @property
    def fail_on(self) -> Optional[str]:
        """Default fail-on severity when --fail-on is not given."""
        return self.get("scan.fail_on")


def load_config(path: Optional[Path] = None, warn=None) -> Config:
    """
    Find and load the active configuration.

    Lookup order: explicit path, $MLVSCAN_CONFIG, ./mlvscan.yaml, then the
    packaged default.yaml. Explicit locations must load cleanly; a broken
    implicit file is reported through warn() and skipped.
    """
    if path is not None:
        return Config.from_file(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Config.from_file(Path(env_path))

    for candidate in (Path.cwd() / LOCAL_CONFIG_NAME, _get_config_dir() / "default.yaml"):
        if not candidate.is_file():
            continue
        try:
            return Config.from_file(candidate)
        except ConfigError as e:
            if warn:
                warn(str(e))

    return Config()
