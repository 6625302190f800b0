"""CSV output for graded series."""

from typing import Dict, Iterable, List
from pathlib import Path
import csv

from seriespick.review import RESULT_FIELDS


def _format_cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def result_fieldnames(rows: Iterable[Dict]) -> List[str]:
    """Input columns in first-seen order, then the result columns."""
    fieldnames: List[str] = []
    for row in rows:
        for key in row:
            if key not in RESULT_FIELDS and key not in fieldnames:
                fieldnames.append(key)
    return fieldnames + RESULT_FIELDS


def write_results_csv(rows: List[Dict], output_path: str) -> None:
    """
    Write graded series rows to CSV.

    Result columns always come last in a fixed order. Ungraded rows get
    empty result cells and editable is written as true/false.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = result_fieldnames(rows)
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames, restval="")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _format_cell(row.get(key)) for key in fieldnames})
