"""
Config command for pcb-sexpr CLI.

Usage:
    pcb-sexpr config --show          Show effective configuration with sources
    pcb-sexpr config --init          Create template config file
    pcb-sexpr config --paths         Show config file paths
    pcb-sexpr config get <key>       Get a specific config value
"""

import argparse
import sys
from pathlib import Path

from pcb_sexpr.cli.utils import print_error
from pcb_sexpr.config import (
    CONFIG_FILENAMES,
    KNOWN_KEYS,
    USER_CONFIG_PATH,
    Config,
    ConfigError,
    generate_template,
    get_config_paths,
)
from pcb_sexpr.serializer import quote_string


def main(argv: list[str] | None = None) -> int:
    """Main entry point for config command."""
    parser = argparse.ArgumentParser(
        prog="pcb-sexpr config",
        description="Manage pcb-sexpr configuration",
    )

    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show",
        action="store_true",
        help="Show effective configuration with sources",
    )
    action_group.add_argument(
        "--init",
        action="store_true",
        help="Create template config file in current directory",
    )
    action_group.add_argument(
        "--paths",
        action="store_true",
        help="Show config file paths",
    )
    parser.add_argument("action", nargs="?", choices=["get"], help="Config action")
    parser.add_argument("key", nargs="?", help="Config key (e.g., format.max_width)")
    parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/pcb-sexpr/config.toml) for --init",
    )

    args = parser.parse_args(argv)

    try:
        if args.init:
            return _init_config(args.user)
        elif args.paths:
            return _show_paths()
        elif args.action == "get":
            if not args.key:
                print("Error: 'get' requires a key argument", file=sys.stderr)
                return 1
            return _get_config(args.key)
        else:
            return _show_config()

    except ConfigError as e:
        print_error(e)
        return 1


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective pcb-sexpr configuration")
    for section, keys in KNOWN_KEYS.items():
        print()
        print(f"[{section}]")
        section_obj = getattr(config, section)
        for key in keys:
            _print_value(key, getattr(section_obj, key), config.get_source(f"{section}.{key}"))

    return 0


def _format_value(value) -> str:
    """Format a config value as a TOML literal."""
    if isinstance(value, str):
        # TOML basic strings share the codec escapes; other control
        # characters need \uXXXX
        quoted = quote_string(value)
        return "".join(
            f"\\u{ord(ch):04X}" if ord(ch) < 0x20 or ord(ch) == 0x7F else ch for ch in quoted
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _print_value(key: str, value, source: str) -> None:
    """Print a config value with its source."""
    # Show just filename for brevity
    source_display = Path(source).name if source != "default" else source
    print(f"{key} = {_format_value(value)}  # from: {source_display}")


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print(f"User config: {USER_CONFIG_PATH}")
    print("  Status: exists" if paths["user"] else "  Status: not found")
    print()

    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")

    return 0


def _init_config(user: bool = False) -> int:
    """Create a template config file."""
    if user:
        target = USER_CONFIG_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
    else:
        target = Path.cwd() / CONFIG_FILENAMES[0]

    if target.exists():
        print(f"Error: Config file already exists: {target}", file=sys.stderr)
        print("Remove it first or edit manually.", file=sys.stderr)
        return 1

    try:
        target.write_text(generate_template())
    except OSError as e:
        print(f"Error writing config file: {e}", file=sys.stderr)
        return 1

    print(f"Created config template: {target}")
    return 0


def _get_config(key: str) -> int:
    """Get a specific config value."""
    parts = key.split(".")
    if len(parts) != 2:
        print(f"Error: Invalid key format '{key}'. Use 'section.key' format.", file=sys.stderr)
        return 1

    section, attr = parts
    if section not in KNOWN_KEYS:
        print(f"Error: Unknown config section '{section}'", file=sys.stderr)
        return 1
    if attr not in KNOWN_KEYS[section]:
        print(f"Error: Unknown key '{attr}' in section '{section}'", file=sys.stderr)
        return 1

    config = Config.load()
    value = getattr(getattr(config, section), attr)
    print(value if isinstance(value, str) else _format_value(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
