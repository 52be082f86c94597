"""
Configuration file support for hcptf.

Provides hierarchical configuration loading from:
1. Project config: .hcptf.toml or hcptf.toml in project root
2. User config: ~/.config/hcptf/config.toml

Project config overrides user config. The API address can also come from
HCPTF_ADDRESS or TFE_ADDRESS, and the API token from TFE_TOKEN or
HCPTF_TOKEN; credential files are managed outside this module.
"""

import os
import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hcptf.exceptions import ConfigurationError

# Config file names to search for in project directories
CONFIG_FILENAMES = [".hcptf.toml", "hcptf.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "hcptf" / "config.toml"

DEFAULT_ADDRESS = "https://app.terraform.io"

VALIDATION_MODES = ("off", "warn", "strict")

OUTPUT_FORMATS = ("table", "json")

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"output_format", "verbose"},
    "router": {"validation", "passthrough"},
    "api": {"address", "timeout"},
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    output_format: str = "table"
    verbose: bool = False


@dataclass
class RouterConfig:
    """URL-style routing options."""

    validation: str = "off"
    passthrough: list[str] = field(default_factory=list)


@dataclass
class ApiConfig:
    """API connection options."""

    address: str = DEFAULT_ADDRESS
    timeout: float = 30.0


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    router: RouterConfig = field(default_factory=RouterConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file cannot be read or parsed
            ConfigurationError: If a value is invalid
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        config.validate()
        return config

    def validate(self) -> None:
        """Check value constraints that TOML types alone cannot express."""
        if self.router.validation not in VALIDATION_MODES:
            raise ConfigurationError(
                "Invalid router validation mode",
                context={
                    "router.validation": self.router.validation,
                    "available": list(VALIDATION_MODES),
                    "source": self.get_source("router.validation"),
                },
                suggestions=["Use one of the available validation modes"],
            )
        if self.defaults.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                "Invalid output format",
                context={
                    "defaults.output_format": self.defaults.output_format,
                    "available": list(OUTPUT_FORMATS),
                    "source": self.get_source("defaults.output_format"),
                },
            )
        if self.api.timeout <= 0:
            raise ConfigurationError(
                "API timeout must be positive",
                context={"api.timeout": self.api.timeout},
            )

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")

    @property
    def address(self) -> str:
        """API address, environment first."""
        return os.environ.get("HCPTF_ADDRESS") or os.environ.get("TFE_ADDRESS") or self.api.address

    @staticmethod
    def token() -> str | None:
        """API token from the environment, or None."""
        return os.environ.get("TFE_TOKEN") or os.environ.get("HCPTF_TOKEN") or None


class ConfigError(Exception):
    """Configuration-related errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file safely.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data

    Raises:
        ConfigError: If TOML is invalid
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    sections = {
        "defaults": config.defaults,
        "router": config.router,
        "api": config.api,
    }
    for section, target in sections.items():
        if section not in data:
            continue
        section_data = data[section]
        if not isinstance(section_data, dict):
            raise ConfigError(f"'{section}' must be a table in {source}")
        _warn_unknown_keys(section_data, KNOWN_KEYS[section], section, source)

        for key in sorted(KNOWN_KEYS[section]):
            if key in section_data:
                setattr(target, key, _coerce(section, key, section_data[key], source))
                sources[f"{section}.{key}"] = source


def _coerce(section: str, key: str, value: Any, source: str) -> Any:
    """Check a raw TOML value against the dataclass field type."""
    if (section, key) == ("api", "timeout"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"'{section}.{key}' must be a number in {source}")
        return float(value)
    if (section, key) == ("router", "passthrough"):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{section}.{key}' must be a list of strings in {source}")
        return list(value)
    if (section, key) == ("defaults", "verbose"):
        if not isinstance(value, bool):
            raise ConfigError(f"'{section}.{key}' must be true or false in {source}")
        return value
    if not isinstance(value, str):
        raise ConfigError(f"'{section}.{key}' must be a string in {source}")
    return value


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# hcptf configuration file
# Place as .hcptf.toml in project root or ~/.config/hcptf/config.toml for user defaults

[defaults]
# Output format for `hcptf route`: table, json
# output_format = "table"

# Enable verbose (debug) logging by default
# verbose = false

[router]
# Check that organizations and workspaces in URL-style arguments exist
# before running a command: off, warn, strict
# validation = "off"

# Extra first tokens that are never treated as organization names
# passthrough = []

[api]
# HCP Terraform or Terraform Enterprise address
# (HCPTF_ADDRESS and TFE_ADDRESS take precedence)
# address = "https://app.terraform.io"

# Request timeout in seconds
# timeout = 30.0
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
