"""Constants for cc-license."""

# Exit codes for the CLI
EXIT_SUCCESS = 0  # Every URL resolved
EXIT_PARSE_FAILURES = 1  # At least one URL failed to parse
EXIT_ERROR = 2  # Configuration or usage error

# Hosts that publish Creative Commons licenses
CC_HOSTS = frozenset({"creativecommons.org", "www.creativecommons.org"})

SUPPORTED_SCHEMES = frozenset({"http", "https"})

# First path segment of each URL family
LICENSES_SEGMENT = "licenses"
PUBLIC_DOMAIN_SEGMENT = "publicdomain"
ZERO_SEGMENT = "zero"

# Trailing segments addressing a rendering of a license, e.g. "deed.de"
DOCUMENT_SUFFIX_PATTERN = r"(deed|legalcode)(\.[A-Za-z_-]+)?|rdf"

VERSION_PATTERN = r"\d+\.\d+"

# CC0 has only ever been published as 1.0
PUBLIC_DOMAIN_VERSION = "1.0"

# License versions Creative Commons has published
PUBLISHED_VERSIONS = frozenset({"1.0", "2.0", "2.5", "3.0", "4.0"})

CANONICAL_URL_BASE = "https://creativecommons.org"

# Configuration file names, in lookup order within one directory
CONFIG_FILE_NAMES = (".cc-license.yaml", ".cc-license.yml")

# Files marking a project root; config discovery stops there
PROJECT_ROOT_MARKERS = ("pyproject.toml", ".git")
