"""
Configuration file support for pcb-sexpr.

Provides hierarchical configuration loading from:
1. Project config: .pcb-sexpr.toml or pcb-sexpr.toml in project root
2. User config: ~/.config/pcb-sexpr/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pcb_sexpr.exceptions import ConfigError
from pcb_sexpr.serializer import SerializeOptions

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Config file names to search for in project directories
CONFIG_FILENAMES = [".pcb-sexpr.toml", "pcb-sexpr.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "pcb-sexpr" / "config.toml"

# All known config keys and their expected types
KNOWN_KEYS: dict[str, dict[str, type]] = {
    "defaults": {"verbose": bool},
    "format": {
        "pretty": bool,
        "indent": str,
        "max_width": int,
        "quote_all": bool,
        "compact": bool,
    },
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    verbose: bool = False


@dataclass
class FormatConfig:
    """Serializer settings."""

    pretty: bool = True
    indent: str = "  "
    max_width: int = 80
    quote_all: bool = False
    compact: bool = True


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    format: FormatConfig = field(default_factory=FormatConfig)

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
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            _merge_config(config, _load_toml_file(USER_CONFIG_PATH), str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            _merge_config(config, _load_toml_file(project_config), str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")

    def serialize_options(self, **overrides: Any) -> SerializeOptions:
        """
        Build serializer options from the format section.

        Args:
            **overrides: Values that take precedence (e.g. from CLI flags);
                None values are ignored

        Returns:
            SerializeOptions with overrides applied
        """
        fmt = self.format
        options = SerializeOptions(
            pretty=fmt.pretty,
            indent=fmt.indent,
            max_width=fmt.max_width,
            quote_all=fmt.quote_all,
            compact=fmt.compact,
        )
        changes = {k: v for k, v in overrides.items() if v is not None}
        return options.replace(**changes) if changes else options


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
    Load a TOML file.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", context={"file": str(path)}) from e


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

    for section, known in KNOWN_KEYS.items():
        if section not in data:
            continue
        section_data = data[section]
        if not isinstance(section_data, dict):
            raise ConfigError(
                f"Config key '{section}' must be a table",
                context={"file": source},
                suggestions=[f"Use a [{section}] section"],
            )
        target = getattr(config, section)

        for key, value in section_data.items():
            if key not in known:
                warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=3)
                continue
            _check_type(section, key, value, known[key], source)
            setattr(target, key, value)
            sources[f"{section}.{key}"] = source


def _check_type(section: str, key: str, value: Any, expected: type, source: str) -> None:
    """Raise ConfigError if a config value has the wrong type."""
    # bool is a subclass of int; reject it for integer settings
    if isinstance(value, expected) and not (expected is int and isinstance(value, bool)):
        return
    raise ConfigError(
        f"Invalid value for {section}.{key}",
        context={"file": source, "expected": expected.__name__, "got": type(value).__name__},
        suggestions=[f"Set {key} to a {expected.__name__} value"],
    )


def get_config_paths(start_dir: Path | None = None) -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys mapping to paths (or None)
    """
    if start_dir is None:
        start_dir = Path.cwd()
    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": _find_project_config(start_dir),
    }


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# pcb-sexpr configuration file
# Place as .pcb-sexpr.toml in project root or ~/.config/pcb-sexpr/config.toml for user defaults

[defaults]
# Enable verbose (debug) logging by default
# verbose = false

[format]
# Break long or nested lists over several lines
# pretty = true

# Indentation text per nesting level
# indent = "  "

# Preferred maximum width of a single-line list
# max_width = 80

# Quote every raw string value, even when not required
# quote_all = false

# Keep any list that fits within max_width on one line
# compact = true
"""


__all__ = [
    "Config",
    "ConfigError",
    "DefaultsConfig",
    "FormatConfig",
    "generate_template",
    "get_config_paths",
]
