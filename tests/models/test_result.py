"""Tests for resolution result models."""

from cc_license.exceptions import UnknownLicenseCodeError
from cc_license.models.kind import LicenseKind
from cc_license.models.license import License
from cc_license.models.result import ResolutionError, ResolutionResult


class TestResolutionError:
    """Tests for ResolutionError."""

    def test_from_exception(self) -> None:
        """Test that kind and message come from the exception."""
        exc = UnknownLicenseCodeError("https://creativecommons.org/licenses/x/4.0/")
        error = ResolutionError.from_exception(exc)

        assert error.kind == "unknown_license_code"
        assert error.message == str(exc)


class TestResolutionResult:
    """Tests for ResolutionResult."""

    def test_ok_with_license(self) -> None:
        """Test that a result with a license is ok."""
        result = ResolutionResult(
            url="https://creativecommons.org/licenses/by/4.0/",
            license=License(kind=LicenseKind.BY, version="4.0"),
        )
        assert result.ok is True

    def test_not_ok_with_error(self) -> None:
        """Test that a result with only an error is not ok."""
        result = ResolutionResult(
            url="https://example.com/",
            error=ResolutionError(kind="unsupported_host", message="Unsupported host"),
        )
        assert result.ok is False
        assert result.model_dump()["ok"] is False
