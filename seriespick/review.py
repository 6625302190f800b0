"""Batch grading of saved predictions against series snapshots."""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
import csv
import logging

import pandas as pd

from seriespick.classifier import PredictionClassifier
from seriespick.config import DEFAULT_CONFIG, SeriesConfig
from seriespick.engine.progression import parse_schedule_marker
from seriespick.engine.types import SeriesSnapshot
from seriespick.normalization.schema import validate_series_rows

logger = logging.getLogger(__name__)

RESULT_FIELDS = ["progression", "outcome", "points", "editable"]


def _parse_wins(value, wins_required: int) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if number != number or not number.is_integer():
        return None
    wins = int(number)
    if wins < 0 or wins > wins_required:
        return None
    return wins


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    # pandas hands back NaN for empty cells
    if isinstance(value, float) and value != value:
        return None
    text = str(value).strip()
    return text or None


def load_rows(path: Path) -> List[Dict]:
    rows: List[Dict] = []
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            rows.append(row)
    return rows


def row_to_snapshot(row: Dict, config: SeriesConfig = DEFAULT_CONFIG) -> Optional[SeriesSnapshot]:
    """Build a snapshot from a series row, or None if the row cannot be graded safely."""
    slug = str(row.get("slug") or "")
    top_wins = _parse_wins(row.get("top_wins"), config.wins_required)
    bottom_wins = _parse_wins(row.get("bottom_wins"), config.wins_required)
    if (
        top_wins is None
        or bottom_wins is None
        or (top_wins == config.wins_required and bottom_wins == config.wins_required)
    ):
        logger.warning(
            "Skipping series %s: unusable score %r-%r",
            slug,
            row.get("top_wins"),
            row.get("bottom_wins"),
        )
        return None

    raw_time = _clean(row.get("next_game_time"))
    next_game_time = parse_schedule_marker(raw_time)
    if raw_time is not None and next_game_time is None:
        # A garbled start time must not read as unscheduled
        logger.warning("Skipping series %s: unparseable next_game_time %r", slug, raw_time)
        return None

    return SeriesSnapshot(
        high_seed_name=str(row.get("top_seed") or ""),
        high_seed_wins=top_wins,
        low_seed_name=str(row.get("bottom_seed") or ""),
        low_seed_wins=bottom_wins,
        next_game_time=next_game_time,
        slug=slug,
    )


def evaluate_rows(
    rows: List[Dict],
    config: SeriesConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[Dict]:
    """
    Grade each series row against its saved prediction.

    Returns one dict per input row: the original fields plus progression,
    outcome, points and editable. Rows with unusable win counts or an
    unparseable game time are kept with empty result fields.
    """
    validate_series_rows(rows)
    classifier = PredictionClassifier(config)

    results: List[Dict] = []
    skipped = 0
    for row in rows:
        out_row = dict(row)
        snapshot = row_to_snapshot(row, config)
        if snapshot is None:
            skipped += 1
            for key in RESULT_FIELDS:
                out_row[key] = None
            results.append(out_row)
            continue

        prediction = _clean(row.get("prediction"))
        out_row.update(classifier.evaluate(snapshot, prediction, now=now).to_dict())
        results.append(out_row)

    logger.info("Graded %d series (%d skipped)", len(results) - skipped, skipped)
    return results


def evaluate_frame(
    frame: pd.DataFrame,
    config: SeriesConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> pd.DataFrame:
    """DataFrame flavour of evaluate_rows; index is preserved."""
    rows = frame.to_dict(orient="records")
    graded = evaluate_rows(rows, config=config, now=now)
    result = frame.copy()
    for key in RESULT_FIELDS:
        result[key] = [row[key] for row in graded]
    return result
