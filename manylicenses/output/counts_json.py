"""JSON output formatter for license counts."""
import json


class CountsJsonFormatter:
    """Format the license count mapping as JSON."""

    def format_counts(self, counts: dict[str, int]) -> str:
        """Format counts as a JSON object string.

        Keys keep their first-seen order. Records without a declared
        license are counted under the empty-string key.

        Args:
            counts: Mapping of license identifier to occurrence count.

        Returns:
            JSON string representation of the counts.
        """
        return json.dumps(counts, indent=2)
