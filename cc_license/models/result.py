"""Resolution result models for cc-license output."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from cc_license.exceptions import ParseError
from cc_license.models.license import License


class ResolutionError(BaseModel):
    """Why a URL could not be resolved."""

    model_config = {"extra": "forbid"}

    kind: str = Field(description="Stable error kind, e.g. 'unsupported_host'")
    message: str = Field(description="Human-readable error message")

    @classmethod
    def from_exception(cls, error: ParseError) -> "ResolutionError":
        return cls(kind=error.kind, message=str(error))


class ResolutionResult(BaseModel):
    """Outcome of resolving one URL: either a license or an error."""

    model_config = {"extra": "forbid"}

    url: str = Field(description="URL as given by the caller")
    license: Optional[License] = Field(
        default=None,
        description="Parsed license, None on failure",
    )
    error: Optional[ResolutionError] = Field(
        default=None,
        description="Failure details, None on success",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        """True if the URL resolved to a license."""
        return self.license is not None
