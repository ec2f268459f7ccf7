"""Edition labels Creative Commons attaches to unported licenses."""

from enum import Enum

from cc_license.models.kind import LicenseKind


class Nomenclature(Enum):
    """Label shown after the version when a license has no jurisdiction."""

    GENERIC = "Generic"
    UNPORTED = "Unported"
    INTERNATIONAL = "International"
    UNIVERSAL = "Universal"

    @classmethod
    def for_license(cls, kind: LicenseKind, version: str) -> "Nomenclature":
        """Pick the label for a kind and version.

        CC0 is always Universal. Otherwise 1.x and 2.x are Generic,
        3.x Unported, and 4.x onwards International.

        Args:
            kind: The license kind.
            version: A validated major.minor version string.

        Returns:
            The matching Nomenclature.
        """
        if kind.is_public_domain:
            return cls.UNIVERSAL
        # Compared as text: versions may be arbitrarily long digit strings
        major = version.split(".", 1)[0].lstrip("0") or "0"
        if len(major) > 1 or major > "3":
            return cls.INTERNATIONAL
        if major == "3":
            return cls.UNPORTED
        return cls.GENERIC
