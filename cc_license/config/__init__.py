"""Configuration handling for cc-license."""
from __future__ import annotations

from cc_license.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
    load_resolver,
)
from cc_license.models.config import ResolverConfig

__all__ = [
    "ResolverConfig",
    "find_config_file",
    "load_config",
    "load_config_file",
    "load_resolver",
]
