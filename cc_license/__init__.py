"""cc-license - Parse Creative Commons license URLs into typed licenses."""

__version__ = "0.1.0"

from cc_license.exceptions import (
    CCLicenseError,
    ConfigurationError,
    InvalidPublicDomainVersionError,
    InvalidUrlError,
    InvalidVersionError,
    MalformedPathError,
    ParseError,
    UnknownJurisdictionError,
    UnknownLicenseCodeError,
    UnrecognizedPathError,
    UnsupportedHostError,
)
from cc_license.formatting import (
    rights,
    rights_full,
    short,
    spdx_id,
    to_string,
    to_url,
    version,
)
from cc_license.models import License, LicenseKind, Nomenclature
from cc_license.resolver import LicenseResolver, from_url

__all__ = [
    "CCLicenseError",
    "ConfigurationError",
    "InvalidPublicDomainVersionError",
    "InvalidUrlError",
    "InvalidVersionError",
    "License",
    "LicenseKind",
    "LicenseResolver",
    "MalformedPathError",
    "Nomenclature",
    "ParseError",
    "UnknownJurisdictionError",
    "UnknownLicenseCodeError",
    "UnrecognizedPathError",
    "UnsupportedHostError",
    "from_url",
    "rights",
    "rights_full",
    "short",
    "spdx_id",
    "to_string",
    "to_url",
    "version",
]
