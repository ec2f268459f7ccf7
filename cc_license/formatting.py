"""Rendering of parsed licenses into canonical strings.

Every function here is a pure function of a License value.
Uses the license-expression library to confirm SPDX identifiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from license_expression import ExpressionError, get_spdx_licensing

from cc_license.constants import (
    CANONICAL_URL_BASE,
    LICENSES_SEGMENT,
    PUBLIC_DOMAIN_SEGMENT,
)
from cc_license.models.nomenclature import Nomenclature

if TYPE_CHECKING:
    from cc_license.models.license import License

# Initialize SPDX licensing for identifier lookups
_licensing = get_spdx_licensing()


def rights(license: License) -> str:
    """Abbreviated rights, e.g. 'CC BY-NC-SA'."""
    return license.kind.abbreviation


def rights_full(license: License) -> str:
    """Full rights phrase, e.g. 'Attribution-NonCommercial-ShareAlike'."""
    return license.kind.full_text


def version(license: License) -> str:
    """Version token exactly as it appeared in the URL."""
    return license.version


def short(license: License) -> str:
    """Compact citation form, e.g. 'CC BY-NC 4.0'.

    The jurisdiction is never included.
    """
    return f"{rights(license)} {license.version}"


def edition(license: License) -> str:
    """Label placed between the version and the word 'license'.

    Ported licenses use their jurisdiction: two-letter slugs are country
    codes and are upper-cased, longer slugs are capitalized.

    Args:
        license: The license to label.

    Returns:
        Jurisdiction display form, or the Nomenclature label.
    """
    if license.jurisdiction:
        if len(license.jurisdiction) == 2:
            return license.jurisdiction.upper()
        return license.jurisdiction.capitalize()
    return Nomenclature.for_license(license.kind, license.version).value


def to_string(license: License) -> str:
    """Full descriptive sentence.

    A ported license shows its jurisdiction in place of the edition label.
    Two-letter country slugs are upper-cased ('us' -> 'US') and longer
    slugs are capitalized ('scotland' -> 'Scotland').

    Example:
        'Creative Commons Attribution-NonCommercial-ShareAlike 4.0
        International license (CC BY-NC-SA 4.0).'
    """
    return (
        f"Creative Commons {rights_full(license)} {license.version} "
        f"{edition(license)} license ({short(license)})."
    )


def spdx_id(license: License) -> Optional[str]:
    """SPDX identifier of a license, if SPDX lists one.

    Args:
        license: The license to identify.

    Returns:
        SPDX identifier such as 'CC-BY-SA-4.0' or 'CC-BY-3.0-US',
        or None when the SPDX license list has no such entry.
    """
    if license.kind.is_public_domain:
        candidate = f"CC0-{license.version}"
    else:
        candidate = f"CC-{license.kind.code.upper()}-{license.version}"
        if license.jurisdiction:
            candidate += f"-{license.jurisdiction.upper()}"

    try:
        parsed = _licensing.parse(candidate, validate=True)
    except ExpressionError:
        return None
    key = getattr(parsed, "key", None)
    # Compound or partially matched expressions are not identifiers
    if key is None or str(key).lower() != candidate.lower():
        return None
    return str(key)


def to_url(license: License) -> str:
    """Canonical https URL of a license, with a trailing slash."""
    if license.kind.is_public_domain:
        return (
            f"{CANONICAL_URL_BASE}/{PUBLIC_DOMAIN_SEGMENT}/"
            f"{license.kind.code}/{license.version}/"
        )
    url = f"{CANONICAL_URL_BASE}/{LICENSES_SEGMENT}/{license.kind.code}/{license.version}/"
    if license.jurisdiction:
        url += f"{license.jurisdiction}/"
    return url
