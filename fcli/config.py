"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables (F_SYMBOLS, F_LOG_LEVEL, F_ASCII_ONLY)
  2. Project config (.f/config.yaml)
  3. User config (~/.f/config.yaml)
  4. Defaults

A broken config file is skipped with a warning; it never stops dispatch.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .presentation.symbols import get_symbols

logger = logging.getLogger(__name__)


SYMBOL_CHOICES = ("auto", "unicode", "ascii")
LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.symbols not in SYMBOL_CHOICES:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(SYMBOL_CHOICES)}"
        return None


@dataclass
class LogConfig:
    """Diagnostic logging preferences."""
    level: str = "warning"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.level not in LOG_LEVELS:
            return f"Unknown log level '{self.level}'. Valid: {', '.join(LOG_LEVELS)}"
        return None


@dataclass
class Config:
    """Application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        display_data = data.get("display")
        log_data = data.get("log")
        if not isinstance(display_data, dict):
            display_data = {}
        if not isinstance(log_data, dict):
            log_data = {}

        return cls(
            display=DisplayConfig(
                symbols=str(display_data.get("symbols", "auto")).lower()
            ),
            log=LogConfig(
                level=str(log_data.get("level", "warning")).lower()
            )
        )


# Settings addressable as "section.setting"
SETTINGS = {
    "display.symbols": ("display", "symbols"),
    "log.level": ("log", "level"),
}


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment
      2. Project config (.f/config.yaml)
      3. User config (~/.f/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".f"
    PROJECT_CONFIG_DIR = ".f"
    CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None, user_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.user_dir = Path(user_dir) if user_dir else self.USER_CONFIG_DIR
        self._config: Optional[Config] = None
        # Problems found while loading; logged by flush_warnings()
        self.warnings: List[str] = []

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.user_dir / self.CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        overrides: Dict[str, Any] = {}
        if os.environ.get("F_SYMBOLS"):
            overrides.setdefault("display", {})["symbols"] = os.environ["F_SYMBOLS"]
        if os.environ.get("F_ASCII_ONLY", "").lower() in ("1", "true", "yes"):
            overrides.setdefault("display", {})["symbols"] = "ascii"
        if os.environ.get("F_LOG_LEVEL"):
            overrides.setdefault("log", {})["level"] = os.environ["F_LOG_LEVEL"]
        config_data = self._merge(config_data, overrides)

        config = Config.from_dict(config_data)

        # Invalid values fall back to defaults
        if config.display.validate():
            self.warnings.append(f"{config.display.validate()}; using 'auto'")
            config.display = DisplayConfig()
        if config.log.validate():
            self.warnings.append(f"{config.log.validate()}; using 'warning'")
            config.log = LogConfig()

        self._config = config
        return self._config

    def flush_warnings(self) -> None:
        """
        Log what load() found wrong, then forget it.

        load() only collects: it runs before logging is configured, since
        the log level itself comes from the config.
        """
        for message in self.warnings:
            logger.warning(message)
        self.warnings = []

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML layer. Missing or malformed files contribute nothing."""
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.warnings.append(f"Ignoring unreadable config {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self.warnings.append(f"Ignoring config {path}: expected a mapping")
            return {}
        return data

    def _write(self, path: Path, data: Dict[str, Any]):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Only the chosen file is touched, and only the one key changes in it,
        so settings from other layers keep their priority.

        Args:
            key: Dot-separated key (e.g., "display.symbols")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        if key not in SETTINGS:
            return f"Unknown setting: {key}. Valid: {', '.join(SETTINGS)}"

        section, setting = SETTINGS[key]
        value = value.strip().lower()

        candidate = Config()
        setattr(getattr(candidate, section), setting, value)
        error = getattr(candidate, section).validate()
        if error:
            return error

        path = self.project_config_path if scope == "project" else self.user_config_path
        data = self._read(path)
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][setting] = value
        self._write(path, data)

        # Re-merge on next load
        self._config = None
        return None

    def get(self, key: str) -> Optional[str]:
        """Get an effective configuration value, or None for unknown keys."""
        if key not in SETTINGS:
            return None
        section, setting = SETTINGS[key]
        return getattr(getattr(self.load(), section), setting)

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        def marker(path: Path) -> str:
            return symbols.check_pass if path.exists() else "(not present)"

        lines = [
            "Configuration:",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            "",
            "Log:",
            f"  Level: {config.log.level}",
            "",
            "Config files:",
            f"  User: {self.user_config_path} {marker(self.user_config_path)}",
            f"  Project: {self.project_config_path} {marker(self.project_config_path)}",
        ]

        return "\n".join(lines)

