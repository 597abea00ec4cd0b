"""Default generation options from a YAML config file.

Lookup order: an explicit path, then ``$CURL2PY_CONFIG``, then
``~/.config/curl2py/config.yaml`` when it exists. Keys are the
GenerationOptions field names.
"""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from curl2py.exceptions import ConfigError
from curl2py.generator.options import GenerationOptions

CONFIG_ENV_VAR = "CURL2PY_CONFIG"
USER_CONFIG_PATH = Path("~/.config/curl2py/config.yaml")

BUILTIN_DEFAULTS = {
    "library": "requests",
    "include_imports": True,
    "wrap_async": True,
    "add_error_handling": False,
    "use_session": False,
}


def find_config(path: Path | None = None) -> Path | None:
    """Return the config file to read, or None when there is none."""
    if path is not None:
        return path
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    user_path = USER_CONFIG_PATH.expanduser()
    return user_path if user_path.is_file() else None


def load_config(path: Path) -> dict:
    """Read option defaults from a YAML file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping of option names")

    unknown = sorted(set(data) - set(GenerationOptions.model_fields))
    if unknown:
        raise ConfigError(f"Unknown option(s) in {path}: {', '.join(map(str, unknown))}")
    return data


def resolve_options(overrides: dict, config_path: Path | None = None) -> GenerationOptions:
    """Merge built-in defaults, the config file and explicit overrides.

    ``None`` values in ``overrides`` mean "not given" and fall through.
    """
    merged = dict(BUILTIN_DEFAULTS)
    found = find_config(config_path)
    if found is not None:
        merged.update(load_config(found))
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return GenerationOptions(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid options: {e}") from e
