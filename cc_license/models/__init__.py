"""Pydantic data models for cc-license."""

from cc_license.models.config import ResolverConfig
from cc_license.models.kind import LicenseKind
from cc_license.models.license import License
from cc_license.models.nomenclature import Nomenclature
from cc_license.models.result import ResolutionError, ResolutionResult

__all__ = [
    "License",
    "LicenseKind",
    "Nomenclature",
    "ResolutionError",
    "ResolutionResult",
    "ResolverConfig",
]
