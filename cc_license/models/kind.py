"""License kind enumeration for cc-license.

Each kind is one Creative Commons permission combination. The display
strings live in a single table so that adding a kind means adding one row.
"""

from enum import Enum
from typing import Optional


class LicenseKind(Enum):
    """Creative Commons permission combination, valued by its URL code."""

    ZERO = "zero"
    BY = "by"
    BY_SA = "by-sa"
    BY_ND = "by-nd"
    BY_NC = "by-nc"
    BY_NC_SA = "by-nc-sa"
    BY_NC_ND = "by-nc-nd"

    @property
    def code(self) -> str:
        """URL path token, e.g. 'by-nc-sa'."""
        return self.value

    @property
    def abbreviation(self) -> str:
        """Abbreviated rights, e.g. 'CC BY-NC-SA'."""
        return _DISPLAY[self][0]

    @property
    def full_text(self) -> str:
        """Full rights phrase, e.g. 'Attribution-NonCommercial-ShareAlike'."""
        return _DISPLAY[self][1]

    @property
    def is_public_domain(self) -> bool:
        return self is LicenseKind.ZERO

    @classmethod
    def from_code(cls, code: str) -> Optional["LicenseKind"]:
        """Look up a kind by the code used under /licenses/.

        Matching is exact and case-sensitive. The CC0 code is only valid
        under /publicdomain/ and is not returned here.

        Args:
            code: Path segment such as 'by-sa'.

        Returns:
            The matching LicenseKind, or None if the code is unknown.
        """
        return _LICENSE_CODES.get(code)


# kind -> (abbreviation, full rights phrase)
_DISPLAY: dict[LicenseKind, tuple[str, str]] = {
    LicenseKind.ZERO: ("CC0", "CC0"),
    LicenseKind.BY: ("CC BY", "Attribution"),
    LicenseKind.BY_SA: ("CC BY-SA", "Attribution-ShareAlike"),
    LicenseKind.BY_ND: ("CC BY-ND", "Attribution-NoDerivatives"),
    LicenseKind.BY_NC: ("CC BY-NC", "Attribution-NonCommercial"),
    LicenseKind.BY_NC_SA: ("CC BY-NC-SA", "Attribution-NonCommercial-ShareAlike"),
    LicenseKind.BY_NC_ND: ("CC BY-NC-ND", "Attribution-NonCommercial-NoDerivatives"),
}

_LICENSE_CODES: dict[str, LicenseKind] = {
    kind.code: kind for kind in LicenseKind if not kind.is_public_domain
}
