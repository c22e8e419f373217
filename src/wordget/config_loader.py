import argparse
import json
from pathlib import Path
import sys
from typing import Any, Dict, List
from .config import (
    CONFIG_FILE, PROJECT_ROOT, REQUIRED_SCHEMA,
    HARD_MODE_POLICIES, STREAK_POLICIES, WORD_HASH_NAMES
)

def get_abs_path(usr_path_str: str, root_path: Path = PROJECT_ROOT) -> Path:
    """
    Resolves a configured path. Absolute and home-relative paths are used as
    given, anything else is taken relative to the package root.
    """
    user_path = Path(usr_path_str).expanduser()

    if user_path.is_absolute():
        return user_path
    else:
        return root_path / user_path

# --- Custom Exception for Configuration ---

class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or fails validation."""
    pass

# --- CONFIGURATION SCHEMA & VALIDATION ---

def validate_config_schema(config: Dict[str, Any], schema: Dict[str, Any] = REQUIRED_SCHEMA, path: str = "") -> List[str]:
    """
    Walks `schema` alongside `config`. A nested dict in the schema is a
    section, a tuple lists the types a leaf may have. Returns every problem
    found rather than stopping at the first.
    """
    errors: List[str] = []
    for key, expected in schema.items():
        key_path = f"{path}.{key}" if path else key

        if key not in config:
            errors.append(f"Schema Error: Missing required key '{key_path}'")
            continue
        value = config[key]

        if isinstance(expected, dict):
            if isinstance(value, dict):
                errors.extend(validate_config_schema(value, expected, path=key_path))
            else:
                errors.append(f"Schema Error: Section '{key_path}' must be an object, "
                              f"got {type(value).__name__}.")
        # bool is an int subclass, so compare exact types
        elif type(value) not in expected:
            type_names = ", ".join(t.__name__ for t in expected)
            errors.append(f"Schema Error: Key '{key_path}' has wrong type. "
                          f"Expected one of ({type_names}), but got {type(value).__name__}.")
    return errors


def validate_game_policies(config: Dict[str, Any]) -> List[str]:
    """Checks that the policy names under `game` are ones the engine knows."""
    errors: List[str] = []
    game_cfg = config.get('game')
    if not isinstance(game_cfg, dict):
        return errors

    choices = (('hard_mode_policy', HARD_MODE_POLICIES),
               ('streak_policy', STREAK_POLICIES),
               ('word_hash', WORD_HASH_NAMES))
    for key, allowed in choices:
        value = game_cfg.get(key)
        if isinstance(value, str) and value not in allowed:
            errors.append(f"Value Error: Key 'game.{key}' must be one of "
                          f"({', '.join(allowed)}), but got '{value}'.")
    return errors

# --- CONFIGURATION LOADING & MERGING ---

def deep_merge(source: dict, destination: dict) -> dict:
    """Copies `source` into `destination` in place, merging sections key by key."""
    for key, value in source.items():
        current = destination.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            deep_merge(value, current)
        else:
            destination[key] = value
    return destination


def _parse_cli_value(value: str) -> Any:
    """Turns a `--set` value into None, a bool, an int or a float where it reads as one."""
    text = value.strip()
    lowered = text.lower()
    literals = {'none': None, 'null': None, 'true': True, 'false': False}
    if lowered in literals:
        return literals[lowered]
    if text.isdigit():
        return int(text)
    try:
        return float(text)
    except ValueError:
        return text


def set_nested_value(d: dict, key_path: str, value: str):
    """Sets `game.hard_mode`-style dotted keys, creating sections on the way."""
    *sections, leaf = key_path.split('.')
    for section in sections:
        d = d.setdefault(section, {})
    d[leaf] = _parse_cli_value(value)


def parse_cli_args(argv: list[str] | None = None):
    """Defines and parses command-line arguments."""
    parser = argparse.ArgumentParser(prog="wordget", description="Daily five-letter word puzzle in the terminal")
    parser.add_argument("-c", "--config", type=Path, help="Path to a custom configuration JSON file.")
    parser.add_argument("--storage", type=str, help="Path of the JSON file that holds saved games and stats.")
    parser.add_argument("--easy", action="store_true", help="Turn off the hard mode constraint.")
    parser.add_argument('--set', nargs=2, action='append', metavar=('KEY', 'VALUE'), help="Override a config value using dot notation.")
    return parser.parse_args(argv)


def load_config(argv: list[str] | None = None) -> dict:
    """
    Loads, merges, and validates configuration from multiple sources.
    Raises ConfigError if loading or validation fails.
    """
    config_file = get_abs_path(CONFIG_FILE)
    if not config_file.exists():
        raise ConfigError(f"Fatal Error: Default config file not found at {config_file}")

    with open(config_file) as f:
        final_config = json.load(f)

    args = parse_cli_args(argv)

    if args.config:
        config = get_abs_path(str(args.config), root_path=Path.cwd())
        if config.exists():
            try:
                with open(config) as f:
                    custom_data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Error parsing custom config file at '{config}': {e}")
            if not isinstance(custom_data, dict):
                raise ConfigError(f"Custom config file at '{config}' must contain a JSON object.")
            final_config = deep_merge(source=custom_data, destination=final_config)
        else:
            print(f"Warning: Custom config file not found at {config}", file=sys.stderr)

    if args.storage:
        set_nested_value(final_config, 'storage.path', args.storage)
    if args.easy:
        final_config.setdefault('game', {})['hard_mode'] = False

    if args.set:
        for key, value in args.set:
            set_nested_value(final_config, key, value)

    validation_errors = validate_config_schema(final_config) + validate_game_policies(final_config)
    if validation_errors:
        header = "Configuration validation failed with the following errors:"
        full_error_message = "\n".join([header] + [f"  - {e}" for e in validation_errors])
        raise ConfigError(full_error_message)

    return final_config
