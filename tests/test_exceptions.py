"""Tests for custom exceptions."""

import pytest

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

PARSE_ERRORS = [
    InvalidUrlError,
    UnsupportedHostError,
    UnrecognizedPathError,
    UnknownLicenseCodeError,
    InvalidVersionError,
    InvalidPublicDomainVersionError,
    UnknownJurisdictionError,
    MalformedPathError,
]


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error_is_exception(self) -> None:
        """Test that CCLicenseError inherits from Exception."""
        assert issubclass(CCLicenseError, Exception)

    def test_configuration_error_inherits_from_base(self) -> None:
        """Test that ConfigurationError inherits from CCLicenseError."""
        assert issubclass(ConfigurationError, CCLicenseError)

    @pytest.mark.parametrize("error_class", PARSE_ERRORS)
    def test_parse_errors_inherit_from_parse_error(self, error_class: type) -> None:
        """Test that every parse failure is a ParseError."""
        assert issubclass(error_class, ParseError)
        assert issubclass(error_class, CCLicenseError)

    def test_public_domain_version_is_a_version_error(self) -> None:
        """Test that the CC0 version error is also an InvalidVersionError."""
        assert issubclass(InvalidPublicDomainVersionError, InvalidVersionError)

    def test_kinds_are_unique(self) -> None:
        """Test that each parse error has its own kind string."""
        kinds = [error_class.kind for error_class in PARSE_ERRORS]
        assert len(set(kinds)) == len(kinds)


class TestParseErrorMessage:
    """Tests for ParseError message and attributes."""

    def test_message_includes_url(self) -> None:
        """Test that the message names the description and URL."""
        error = UnsupportedHostError("https://example.com/")
        assert str(error) == "Unsupported host: 'https://example.com/'"
        assert error.url == "https://example.com/"
        assert error.detail is None

    def test_message_includes_detail(self) -> None:
        """Test that a detail is appended in parentheses."""
        error = InvalidVersionError("u", "version '4'")
        assert str(error) == "Invalid version string: 'u' (version '4')"

    def test_catchable_by_base(self) -> None:
        """Test that parse errors can be caught by CCLicenseError."""
        with pytest.raises(CCLicenseError):
            raise MalformedPathError("https://creativecommons.org/licenses/by/")
