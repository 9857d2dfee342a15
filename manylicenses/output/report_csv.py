"""CSV output formatter for license reports."""
from manylicenses.constants import CSV_HEADER
from manylicenses.models.manifest import EnrichedRecord


def quote(value: str) -> str:
    """Wrap a value in double quotes, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


class CsvFormatter:
    """Format enriched records as CSV lines.

    Every field is quoted and fields are separated by ``", "``, so the
    author/contributor and URL lists (which contain commas) stay intact.
    """

    def format_header(self) -> str:
        """Return the CSV header line."""
        return CSV_HEADER

    def format_record(self, record: EnrichedRecord) -> str:
        """Format a single record as a CSV line.

        Args:
            record: The enriched record to format.

        Returns:
            The CSV data line, without a trailing newline.
        """
        fields = [
            record.name,
            record.version,
            record.license_id,
            record.description,
            record.everyone,
            record.urls,
        ]
        return ", ".join(quote(field) for field in fields)
