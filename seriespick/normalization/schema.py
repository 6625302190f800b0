"""Column checks for series rows before batch grading."""

from typing import Dict, List

SCHEMA_VERSION = "v1"

SERIES_COLUMNS: List[str] = ["slug", "top_seed", "top_wins", "bottom_seed", "bottom_wins"]
OPTIONAL_SERIES_COLUMNS: List[str] = ["next_game_time", "prediction"]

# Win counts may be blank or garbled; those rows are skipped later, not rejected here
NAMED_COLUMNS: List[str] = ["slug", "top_seed", "bottom_seed"]


class SchemaValidationError(ValueError):
    pass


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and value != value:
        return True
    return isinstance(value, str) and not value.strip()


def _row_label(idx: int, row: Dict) -> str:
    slug = row.get("slug")
    return f"row {idx} ({slug})" if not _is_blank(slug) else f"row {idx}"


def validate_series_rows(rows: list) -> None:
    """Raise SchemaValidationError on the first row missing a column or a team/slug value."""
    for idx, row in enumerate(rows):
        missing = [field for field in SERIES_COLUMNS if field not in row]
        if missing:
            raise SchemaValidationError(
                f"series {_row_label(idx, row)} missing fields: {', '.join(missing)}"
            )
        blank = [field for field in NAMED_COLUMNS if _is_blank(row[field])]
        if blank:
            raise SchemaValidationError(
                f"series {_row_label(idx, row)} has blank fields: {', '.join(blank)}"
            )
