"""License value model for cc-license."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from cc_license import formatting
from cc_license.models.kind import LicenseKind


class License(BaseModel):
    """A parsed Creative Commons license.

    Instances are immutable and compare by value. They are normally built by
    LicenseResolver.from_url, which validates the whole URL first; direct
    construction is still validated so no invalid License can exist.
    """

    model_config = {"extra": "forbid", "frozen": True}

    kind: LicenseKind = Field(description="Permission combination")
    version: str = Field(
        pattern=r"^[0-9]+\.[0-9]+$",
        description="major.minor version token, e.g. '4.0'",
    )
    jurisdiction: Optional[str] = Field(
        default=None,
        description="Lower-case port slug, e.g. 'us' (pre-4.0 ports only)",
    )

    @field_validator("jurisdiction")
    @classmethod
    def _normalize_jurisdiction(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().lower()
        return value or None

    @model_validator(mode="after")
    def _check_public_domain(self) -> "License":
        if self.kind.is_public_domain and self.jurisdiction is not None:
            raise ValueError("CC0 has no jurisdiction ports")
        return self

    def rights(self) -> str:
        """Abbreviated rights, e.g. 'CC BY-NC-SA'."""
        return formatting.rights(self)

    def rights_full(self) -> str:
        """Full rights phrase, e.g. 'Attribution-NonCommercial-ShareAlike'."""
        return formatting.rights_full(self)

    def short(self) -> str:
        """Compact citation form, e.g. 'CC BY-NC 4.0'."""
        return formatting.short(self)

    def edition(self) -> str:
        """Jurisdiction or edition label, e.g. 'US' or 'International'."""
        return formatting.edition(self)

    def spdx_id(self) -> Optional[str]:
        """SPDX identifier, e.g. 'CC-BY-NC-SA-4.0', or None if SPDX lacks one."""
        return formatting.spdx_id(self)

    def to_url(self) -> str:
        """Canonical https URL, e.g. 'https://creativecommons.org/licenses/by/4.0/'."""
        return formatting.to_url(self)

    def __str__(self) -> str:
        return formatting.to_string(self)
