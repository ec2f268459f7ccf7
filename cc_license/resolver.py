"""Resolution of Creative Commons license URLs into License values.

The grammar is a closed lookup over the URL shapes Creative Commons
publishes:

    /licenses/<code>/<version>/[<jurisdiction>/][deed.<lang>|legalcode|rdf]
    /publicdomain/zero/<version>/[deed.<lang>|legalcode|rdf]

Every check runs before a License is built, and every failure raises a
ParseError subclass.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional
from urllib.parse import urlsplit

from cc_license.constants import (
    CC_HOSTS,
    DOCUMENT_SUFFIX_PATTERN,
    LICENSES_SEGMENT,
    PUBLIC_DOMAIN_SEGMENT,
    PUBLIC_DOMAIN_VERSION,
    PUBLISHED_VERSIONS,
    SUPPORTED_SCHEMES,
    VERSION_PATTERN,
    ZERO_SEGMENT,
)
from cc_license.exceptions import (
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
from cc_license.models.config import ResolverConfig
from cc_license.models.kind import LicenseKind
from cc_license.models.license import License
from cc_license.models.result import ResolutionError, ResolutionResult

_VERSION_RE = re.compile(VERSION_PATTERN, re.ASCII)
_DOCUMENT_SUFFIX_RE = re.compile(DOCUMENT_SUFFIX_PATTERN)


class LicenseResolver:
    """Parse Creative Commons license URLs.

    A resolver holds only its immutable configuration and can be shared
    freely between callers.
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        """Initialize with optional configuration.

        Args:
            config: Resolver configuration. Defaults accept any URL the
                CC grammar allows on creativecommons.org.
        """
        self._config = config if config is not None else ResolverConfig()
        self._hosts = CC_HOSTS.union(self._config.extra_hosts or [])
        self._jurisdictions = (
            frozenset(self._config.jurisdictions)
            if self._config.jurisdictions is not None
            else None
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def from_url(self, url: str) -> License:
        """Parse a Creative Commons license URL.

        Args:
            url: Any string, e.g.
                'https://creativecommons.org/licenses/by-nc-sa/4.0/'.

        Returns:
            The fully validated License.

        Raises:
            InvalidUrlError: If url is not an http(s) URL with a host.
            UnsupportedHostError: If the host is not creativecommons.org.
            UnrecognizedPathError: If the path is not under /licenses/
                or /publicdomain/.
            UnknownLicenseCodeError: If the rights code is unknown.
            InvalidVersionError: If the version is not major.minor, or not
                a published version in strict mode.
            UnknownJurisdictionError: If the jurisdiction is outside the
                configured whitelist.
            MalformedPathError: If segments are missing or left over.
        """
        segments = self._split_path(url)

        if segments[0] == LICENSES_SEGMENT:
            return self._parse_license(url, segments)
        if segments[0] == PUBLIC_DOMAIN_SEGMENT:
            return self._parse_public_domain(url, segments)
        raise UnrecognizedPathError(url, f"unexpected segment {segments[0]!r}")

    def _split_path(self, url: str) -> list[str]:
        """Validate scheme and host, then split the path into segments.

        A trailing slash and a trailing document suffix are discarded.
        Inner empty segments are kept so callers can reject or ignore them.
        """
        if not isinstance(url, str):
            raise InvalidUrlError(url, f"expected str, got {type(url).__name__}")

        try:
            parts = urlsplit(url.strip())
            host = parts.hostname
            # Accessing port validates it
            parts.port
        except ValueError as e:
            raise InvalidUrlError(url, str(e)) from e

        if parts.scheme.lower() not in SUPPORTED_SCHEMES or not host:
            raise InvalidUrlError(url)

        if host.lower() not in self._hosts:
            raise UnsupportedHostError(url, f"host {host!r}")

        path = parts.path.strip("/")
        segments = path.split("/") if path else [""]
        if len(segments) > 1 and _DOCUMENT_SUFFIX_RE.fullmatch(segments[-1]):
            segments = segments[:-1]
        return segments

    def _parse_license(self, url: str, segments: list[str]) -> License:
        # licenses / code / version [/ jurisdiction]
        if len(segments) < 3 or not segments[1] or not segments[2]:
            raise MalformedPathError(url, "expected /licenses/<code>/<version>/")
        if len(segments) > 4:
            raise MalformedPathError(url, "unexpected trailing segments")

        code = segments[1]
        kind = LicenseKind.from_code(code)
        if kind is None:
            raise UnknownLicenseCodeError(url, f"code {code!r}")

        version = self._check_version(url, segments[2])
        if self._config.strict_versions and version not in PUBLISHED_VERSIONS:
            raise InvalidVersionError(url, f"version {version} was never published")

        jurisdiction = segments[3].lower() if len(segments) == 4 else ""
        if jurisdiction and self._jurisdictions is not None:
            if jurisdiction not in self._jurisdictions:
                raise UnknownJurisdictionError(url, f"jurisdiction {jurisdiction!r}")

        return License(kind=kind, version=version, jurisdiction=jurisdiction or None)

    def _parse_public_domain(self, url: str, segments: list[str]) -> License:
        # publicdomain / zero / version
        if len(segments) < 2 or not segments[1]:
            raise MalformedPathError(url, "expected /publicdomain/zero/<version>/")
        if segments[1] != ZERO_SEGMENT:
            raise UnknownLicenseCodeError(url, f"code {segments[1]!r}")
        if len(segments) < 3 or not segments[2]:
            raise MalformedPathError(url, "expected /publicdomain/zero/<version>/")
        if len(segments) > 3:
            raise MalformedPathError(url, "unexpected trailing segments")

        version = self._check_version(url, segments[2])
        if version != PUBLIC_DOMAIN_VERSION:
            raise InvalidPublicDomainVersionError(url, f"version {version}")

        return License(kind=LicenseKind.ZERO, version=version)

    @staticmethod
    def _check_version(url: str, token: str) -> str:
        if not _VERSION_RE.fullmatch(token):
            raise InvalidVersionError(url, f"version {token!r}")
        return token


_default_resolver = LicenseResolver()


def from_url(url: str) -> License:
    """Parse a Creative Commons license URL with the default configuration.

    Example:
        >>> license = from_url("https://creativecommons.org/licenses/by-nc-sa/4.0/")
        >>> str(license)
        'Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International license (CC BY-NC-SA 4.0).'

    Raises:
        ParseError: See LicenseResolver.from_url for the subclasses.
    """
    return _default_resolver.from_url(url)


def resolve_urls(
    urls: Iterable[str], resolver: Optional[LicenseResolver] = None
) -> list[ResolutionResult]:
    """Resolve several URLs, recording failures instead of raising.

    Args:
        urls: URLs to resolve, in output order.
        resolver: Resolver to use. Defaults to the default configuration.

    Returns:
        One ResolutionResult per URL, in input order.
    """
    resolver = resolver or _default_resolver
    results: list[ResolutionResult] = []
    for url in urls:
        try:
            license = resolver.from_url(url)
        except ParseError as e:
            results.append(
                ResolutionResult(url=url, error=ResolutionError.from_exception(e))
            )
        else:
            results.append(ResolutionResult(url=url, license=license))
    return results
