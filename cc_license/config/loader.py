"""Configuration file discovery and loading for cc-license.

A project keeps one `.cc-license.yaml` at its root. Discovery walks up from
the working directory so the file applies from any subdirectory, and stops
at the project root.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cc_license.constants import CONFIG_FILE_NAMES, PROJECT_ROOT_MARKERS
from cc_license.exceptions import ConfigurationError
from cc_license.models.config import ResolverConfig
from cc_license.resolver import LicenseResolver


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find the configuration file that applies to a directory.

    Checks `start_dir` and then each parent, preferring `.cc-license.yaml`
    over `.cc-license.yml` within a directory. The search ends at the first
    directory holding a project root marker (pyproject.toml or .git).

    Args:
        start_dir: Directory to start from. Defaults to the working directory.

    Returns:
        Path to the nearest configuration file, or None.
    """
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        if any((directory / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return None
    return None


def _read_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file whose root must be a mapping.

    Empty files and files holding only comments read as an empty mapping.

    Raises:
        ConfigurationError: If the file is unreadable, not YAML, or not
            a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def load_config_file(path: Path) -> ResolverConfig:
    """Load and validate one configuration file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        The validated ResolverConfig.

    Raises:
        ConfigurationError: If the file cannot be read or holds an unknown
            key or a value of the wrong type.
    """
    data = _read_mapping(path)
    try:
        return ResolverConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration in '{path}': {problems}") from e


def load_config(
    config_path: str | None = None, start_dir: Path | None = None
) -> ResolverConfig:
    """Load the configuration for a run.

    An explicit `config_path` wins. Otherwise the nearest discovered file is
    used, and without one the resolver defaults apply.

    Args:
        config_path: Explicit configuration file, e.g. from `--config`.
        start_dir: Where discovery starts. Defaults to the working directory.

    Raises:
        ConfigurationError: If the chosen file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file(start_dir)
    if path is None:
        return ResolverConfig()
    return load_config_file(path)


def load_resolver(
    config_path: str | None = None, start_dir: Path | None = None
) -> LicenseResolver:
    """Build a LicenseResolver from the configuration that applies.

    Same lookup as load_config.

    Raises:
        ConfigurationError: If the chosen file is invalid.
    """
    return LicenseResolver(load_config(config_path, start_dir))
