"""Custom exceptions for cc-license."""

from typing import Optional


class CCLicenseError(Exception):
    """Base exception for all cc-license errors."""

    pass


class ConfigurationError(CCLicenseError):
    """Exception raised when configuration is invalid."""

    pass


class ParseError(CCLicenseError):
    """Exception raised when a URL cannot be resolved to a license.

    Subclasses identify the kind of failure. ``kind`` is a stable string
    usable in machine-readable output.
    """

    kind = "parse_error"
    description = "Cannot parse license URL"

    def __init__(self, url: object, detail: Optional[str] = None) -> None:
        """Initialize with the offending URL and an optional detail.

        Args:
            url: The value passed to the parser.
            detail: Extra context appended to the message.
        """
        self.url = url
        self.detail = detail
        message = f"{self.description}: {url!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidUrlError(ParseError):
    """The input is not a syntactically usable http(s) URL."""

    kind = "invalid_url"
    description = "Invalid URL"


class UnsupportedHostError(ParseError):
    """The URL is not hosted on creativecommons.org."""

    kind = "unsupported_host"
    description = "Unsupported host"


class UnrecognizedPathError(ParseError):
    """The first path segment is neither 'licenses' nor 'publicdomain'."""

    kind = "unrecognized_path"
    description = "Unrecognized license path"


class UnknownLicenseCodeError(ParseError):
    """The rights code is not a known CC permission combination."""

    kind = "unknown_license_code"
    description = "Invalid rights string"


class InvalidVersionError(ParseError):
    """The version segment is not a major.minor version."""

    kind = "invalid_version"
    description = "Invalid version string"


class InvalidPublicDomainVersionError(InvalidVersionError):
    """CC0 was requested with a version other than 1.0."""

    kind = "invalid_public_domain_version"
    description = "The version of CC0 licenses must be 1.0"


class UnknownJurisdictionError(ParseError):
    """The jurisdiction is not in the configured whitelist."""

    kind = "unknown_jurisdiction"
    description = "Unknown jurisdiction"


class MalformedPathError(ParseError):
    """The path has the wrong number of segments for its branch."""

    kind = "malformed_path"
    description = "Malformed license path"
