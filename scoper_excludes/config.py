"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables
  2. Project config (scoper-excludes.yaml in the project directory)
  3. User config (~/.scoper-excludes/config.yaml)
  4. Defaults
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.parsing.languages.php import PHP_EXCLUDE_PATTERNS
from .errors import ConfigError


@dataclass
class CategorizeConfig:
    """Categorizer behaviour."""
    reset_interfaces: bool = False  # False keeps interfaces across traversals

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not isinstance(self.reset_interfaces, bool):
            return f"categorize.reset_interfaces must be true or false, got {self.reset_interfaces!r}"
        return None


@dataclass
class ParsingConfig:
    """Source parsing limits and file selection."""
    max_file_size: int = 1_000_000
    exclude_patterns: List[str] = field(default_factory=lambda: list(PHP_EXCLUDE_PATTERNS))

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not isinstance(self.max_file_size, int) or self.max_file_size <= 0:
            return f"parsing.max_file_size must be a positive integer, got {self.max_file_size!r}"
        if not isinstance(self.exclude_patterns, list) or not all(
            isinstance(p, str) for p in self.exclude_patterns
        ):
            return "parsing.exclude_patterns must be a list of glob strings"
        return None


@dataclass
class Config:
    """Application configuration."""
    categorize: CategorizeConfig = field(default_factory=CategorizeConfig)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "categorize": {
                "reset_interfaces": self.categorize.reset_interfaces,
            },
            "parsing": {
                "max_file_size": self.parsing.max_file_size,
                "exclude_patterns": list(self.parsing.exclude_patterns),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        categorize_data = data.get("categorize") or {}
        parsing_data = data.get("parsing") or {}
        for section, section_data in (("categorize", categorize_data), ("parsing", parsing_data)):
            if not isinstance(section_data, dict):
                raise ConfigError(f"Config section '{section}' must be a mapping")
        exclude_patterns = parsing_data.get("exclude_patterns", PHP_EXCLUDE_PATTERNS)
        if isinstance(exclude_patterns, (list, tuple)):
            exclude_patterns = list(exclude_patterns)

        return cls(
            categorize=CategorizeConfig(
                reset_interfaces=categorize_data.get("reset_interfaces", False),
            ),
            parsing=ParsingConfig(
                max_file_size=parsing_data.get("max_file_size", 1_000_000),
                exclude_patterns=exclude_patterns,
            ),
        )

    def validate(self) -> Optional[str]:
        """Validate every section. Returns the first error or None."""
        return self.categorize.validate() or self.parsing.validate()


class ConfigManager:
    """
    Manages configuration loading.

    Hierarchy:
      1. Environment
      2. Project config (scoper-excludes.yaml)
      3. User config (~/.scoper-excludes/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".scoper-excludes"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_FILE = "scoper-excludes.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from all sources.

        Raises:
            ConfigError: If a config file is malformed or a value is invalid
        """
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        if os.environ.get("SCOPER_EXCLUDES_RESET_INTERFACES"):
            value = os.environ["SCOPER_EXCLUDES_RESET_INTERFACES"].lower()
            config_data.setdefault("categorize", {})["reset_interfaces"] = value in ("true", "1", "yes")
        if os.environ.get("SCOPER_EXCLUDES_MAX_FILE_SIZE"):
            raw = os.environ["SCOPER_EXCLUDES_MAX_FILE_SIZE"]
            try:
                config_data.setdefault("parsing", {})["max_file_size"] = int(raw)
            except ValueError as e:
                raise ConfigError(f"SCOPER_EXCLUDES_MAX_FILE_SIZE must be an integer, got {raw!r}") from e

        config = Config.from_dict(config_data)
        error = config.validate()
        if error:
            raise ConfigError(error)

        self._config = config
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping at the top level")
        return data

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result


def get_config(project_dir: Optional[Path] = None) -> Config:
    """Convenience function to get config."""
    return ConfigManager(project_dir).load()
