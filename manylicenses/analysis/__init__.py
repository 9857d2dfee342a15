"""License policy analysis for manylicenses."""
from manylicenses.analysis.classifier import Classification, Outcome, classify
from manylicenses.analysis.enrichment import (
    contributor_names,
    enrich_record,
    person_name,
    repository_url,
)
from manylicenses.analysis.normalize import decode_value, iter_records, normalize_row

__all__ = [
    "Classification",
    "Outcome",
    "classify",
    "contributor_names",
    "decode_value",
    "enrich_record",
    "iter_records",
    "normalize_row",
    "person_name",
    "repository_url",
]
