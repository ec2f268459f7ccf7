"""Shared fixtures for cc-license tests."""

import pytest
from click.testing import CliRunner

from cc_license.models.kind import LicenseKind
from cc_license.models.license import License


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def by_nc_sa_4() -> License:
    """The CC BY-NC-SA 4.0 license."""
    return License(kind=LicenseKind.BY_NC_SA, version="4.0")


@pytest.fixture
def cc0() -> License:
    """The CC0 1.0 public-domain dedication."""
    return License(kind=LicenseKind.ZERO, version="1.0")
