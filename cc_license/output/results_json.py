"""JSON output formatter for resolution results."""
import json
from datetime import datetime, timezone
from typing import Any

from cc_license import __version__
from cc_license.models.result import ResolutionResult


class ResultsJsonFormatter:
    """Format resolution results as JSON output.

    Each resolved URL carries every rendering of its license so the output
    can be consumed without this library.
    """

    def format_results(self, results: list[ResolutionResult]) -> str:
        """Format resolution results as a JSON string.

        Args:
            results: Results in the order the URLs were given.

        Returns:
            JSON string representation of the results.
        """
        output = {
            "metadata": self._build_metadata(results),
            "results": [self._build_result(r) for r in results],
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self, results: list[ResolutionResult]) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        resolved = sum(1 for r in results if r.ok)
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "total": len(results),
            "resolved": resolved,
            "failed": len(results) - resolved,
        }

    def _build_result(self, result: ResolutionResult) -> dict[str, Any]:
        """Build the entry for one URL.

        Args:
            result: The resolution result.

        Returns:
            Dictionary with either a 'license' or an 'error' object.
        """
        entry: dict[str, Any] = {"url": result.url, "ok": result.ok}
        if result.license is not None:
            license = result.license
            entry["license"] = {
                "kind": license.kind.code,
                "version": license.version,
                "jurisdiction": license.jurisdiction,
                "rights": license.rights(),
                "rights_full": license.rights_full(),
                "short": license.short(),
                "description": str(license),
                "spdx_id": license.spdx_id(),
                "url": license.to_url(),
            }
        if result.error is not None:
            entry["error"] = result.error.model_dump()
        return entry
