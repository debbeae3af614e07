#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/cli/config.py
"""Configuration file discovery and loading for the textcompare CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, and turning them into option objects.

A config file holds ``DiffOptions`` keys either at the top level or in a
``diff`` table, and ``ExportOptions`` keys in an ``export`` table::

    # .textcompare.toml
    ignore_case = true

    [export]
    format = "markdown"
    include_equal = false

"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from textcompare.constants import CONFIG_FILENAMES
from textcompare.exceptions import ConfigurationError
from textcompare.options import DiffOptions, ExportOptions


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.textcompare] section from pyproject.toml file.

    Returns
    -------
    dict
        Configuration dictionary from [tool.textcompare] section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise argparse.ArgumentTypeError(f"[tool] in {pyproject_path} must be a table, got {type(tool).__name__}")

    config = tool.get("textcompare", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.textcompare] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for ``.textcompare.toml``, ``.textcompare.yaml``,
    ``.textcompare.yml``, ``.textcompare.json`` and finally a
    ``pyproject.toml`` with a ``[tool.textcompare]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Broken pyproject.toml files are skipped during discovery
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches the directory tree from ``start_dir`` (default: cwd) up to the
    filesystem root, then the user home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def split_config(config: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate diff option keys from export option keys.

    Raises
    ------
    ConfigurationError
        If the ``diff`` or ``export`` entries are not tables

    """
    config = dict(config)
    export = config.pop("export", {})
    diff = config.pop("diff", None)
    if diff is None:
        diff = config
    elif config:
        raise ConfigurationError(
            f"Diff options must be either top-level or in a [diff] table, not both: {', '.join(sorted(config))}"
        )

    if not isinstance(diff, dict):
        raise ConfigurationError("The [diff] config entry must be a table", key="diff", value=diff)
    if not isinstance(export, dict):
        raise ConfigurationError("The [export] config entry must be a table", key="export", value=export)
    return diff, export


def options_from_config(config: Dict[str, Any]) -> tuple[DiffOptions, ExportOptions]:
    """Decode both option objects from a loaded configuration mapping.

    Raises
    ------
    ConfigurationError
        If any option is unknown or malformed

    """
    diff, export = split_config(config)
    return DiffOptions.from_dict(diff), ExportOptions.from_dict(export)
