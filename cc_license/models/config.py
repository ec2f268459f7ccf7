"""Configuration Pydantic models for cc-license."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ResolverConfig(BaseModel):
    """Configuration for LicenseResolver.

    Defaults accept every URL the CC grammar allows; each field tightens or
    widens that.
    """

    model_config = {"extra": "forbid"}

    extra_hosts: Optional[List[str]] = Field(
        default=None,
        description="Hosts accepted in addition to creativecommons.org.",
    )
    strict_versions: bool = Field(
        default=False,
        description="Reject license versions Creative Commons never published.",
    )
    jurisdictions: Optional[List[str]] = Field(
        default=None,
        description="Allowed jurisdiction slugs. "
        "Omit to accept any jurisdiction.",
    )

    @field_validator("extra_hosts", "jurisdictions")
    @classmethod
    def _lowercase(cls, values: Optional[List[str]]) -> Optional[List[str]]:
        if values is None:
            return None
        return [value.strip().lower() for value in values]
