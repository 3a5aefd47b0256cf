"""Project configuration: [tool.optargs] in pyproject.toml.

Keys mirror the directive options (except rename, which is per declaration):

    [tool.optargs]
    shuffle = false
    export = true
    builder = false
    warn_threshold = 5
    max_optional = 8

Directive options override these per declaration.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from optargs.domain.exceptions.configuration import ConfigurationError
from optargs.domain.model.configuration import ExpansionConfig

DEFAULT_CONFIG_NAME = "pyproject.toml"
SECTION = ("tool", "optargs")


def load_config(root: Path | None = None, config_path: Path | None = None) -> ExpansionConfig:
    """Load project defaults.

    A missing pyproject.toml or missing section means built-in defaults.
    An explicit config_path must exist.

    Args:
        root: Directory holding pyproject.toml (default: cwd)
        config_path: Explicit config file, overrides root

    Returns:
        ExpansionConfig with project defaults applied

    Raises:
        ConfigurationError: Unreadable TOML or invalid [tool.optargs] values
    """
    explicit = config_path is not None
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME

    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        if explicit:
            raise ConfigurationError(config_path, ".".join(SECTION), "file not found") from e
        return ExpansionConfig()

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(config_path, ".".join(SECTION), f"invalid TOML: {e}") from e

    section: object = data
    for key in SECTION:
        if not isinstance(section, dict) or key not in section:
            return ExpansionConfig()
        section = section[key]

    if not isinstance(section, dict):
        raise ConfigurationError(config_path, ".".join(SECTION), "must be a table")

    return config_from_mapping(section, config_path)


def config_from_mapping(options: dict[str, object], source: Path | None = None) -> ExpansionConfig:
    """Build project defaults from a plain mapping.

    Raises:
        ConfigurationError: Unknown key, wrong type or invalid value
    """
    if "rename" in options:
        raise ConfigurationError(source, "rename", "only valid on a single declaration")

    try:
        return ExpansionConfig().with_options(options, allow_rename=False)
    except (TypeError, ValueError) as e:
        key = next(iter(options), "?") if len(options) == 1 else ".".join(SECTION)
        raise ConfigurationError(source, key, str(e)) from e
