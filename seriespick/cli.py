"""CLI entry points."""

from pathlib import Path
from typing import Optional, Sequence
import argparse
import json
import logging

from seriespick.classifier import PredictionClassifier
from seriespick.config import SeriesConfig
from seriespick.constants import get_team_abbrev
from seriespick.engine.progression import parse_schedule_marker
from seriespick.engine.resolver import series_winner
from seriespick.engine.score import format_score
from seriespick.engine.types import SeriesSnapshot
from seriespick.exceptions import InvalidPredictionError
from seriespick.normalization import SchemaValidationError, validate_prediction
from seriespick.ops.logging import configure_logging
from seriespick.reporting.csv_output import write_results_csv
from seriespick.review import evaluate_rows, load_rows

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _resolve_timestamp(value: Optional[str]):
    if not value:
        return None, True
    parsed = parse_schedule_marker(value)
    return parsed, parsed is not None


def run_classify(
    top_name: str,
    top_wins: int,
    bottom_name: str,
    bottom_wins: int,
    next_game: Optional[str] = None,
    prediction: Optional[str] = None,
    now: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    config = SeriesConfig.load(config_path)
    w = config.wins_required
    if not (0 <= top_wins <= w and 0 <= bottom_wins <= w) or (top_wins == w and bottom_wins == w):
        logger.error("Invalid series score %d-%d for a first-to-%d series", top_wins, bottom_wins, w)
        return EXIT_INVALID_INPUT

    try:
        predicted = validate_prediction(prediction, config)
    except InvalidPredictionError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    now_value, ok = _resolve_timestamp(now)
    if not ok:
        logger.error("Invalid --now timestamp: %s", now)
        return EXIT_INVALID_INPUT

    next_game_time, ok = _resolve_timestamp(next_game)
    if not ok:
        logger.error("Invalid --next-game timestamp: %s", next_game)
        return EXIT_INVALID_INPUT

    snapshot = SeriesSnapshot(
        high_seed_name=top_name,
        high_seed_wins=top_wins,
        low_seed_name=bottom_name,
        low_seed_wins=bottom_wins,
        next_game_time=next_game_time,
    )
    evaluation = PredictionClassifier(config).evaluate(snapshot, predicted, now=now_value)

    payload = {
        "matchup": f"{get_team_abbrev(top_name)}-{get_team_abbrev(bottom_name)}",
        "score": format_score(top_wins, bottom_wins),
        "winner": series_winner(top_wins, bottom_wins, w).value,
        "prediction": predicted,
    }
    payload.update(evaluation.to_dict())
    print(json.dumps(payload, indent=2, sort_keys=True))
    return EXIT_OK


def run_grade(
    input_path: str,
    output_path: Optional[str] = None,
    now: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    config = SeriesConfig.load(config_path)
    now_value, ok = _resolve_timestamp(now)
    if not ok:
        logger.error("Invalid --now timestamp: %s", now)
        return EXIT_INVALID_INPUT

    path = Path(input_path)
    if not path.exists():
        logger.error("Input file not found: %s", path)
        return EXIT_INVALID_INPUT

    rows = load_rows(path)
    try:
        results = evaluate_rows(rows, config=config, now=now_value)
    except SchemaValidationError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    if output_path is None:
        output_path = str(path.with_name(f"{path.stem}_graded.csv"))
    write_results_csv(results, output_path)
    logger.info("Wrote %d graded series to %s", len(results), output_path)
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Series prediction classifier CLI")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default from SERIESPICK_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Classify one series and grade a prediction")
    classify.add_argument("--config", dest="config_path", help="Path to config file")
    classify.add_argument("--top-name", dest="top_name", required=True, help="Top seed team name")
    classify.add_argument("--top-wins", dest="top_wins", type=int, required=True, help="Top seed wins")
    classify.add_argument("--bottom-name", dest="bottom_name", required=True, help="Bottom seed team name")
    classify.add_argument("--bottom-wins", dest="bottom_wins", type=int, required=True, help="Bottom seed wins")
    classify.add_argument("--next-game", dest="next_game", help="Next game start time (ISO-8601)")
    classify.add_argument("--prediction", dest="prediction", help="Predicted score, top seed first (e.g. 4-2)")
    classify.add_argument("--now", dest="now", help="Override evaluation time (ISO-8601)")

    grade = subparsers.add_parser("grade", help="Grade a CSV of series and saved predictions")
    grade.add_argument("--config", dest="config_path", help="Path to config file")
    grade.add_argument("--input", dest="input_path", required=True, help="Series CSV to grade")
    grade.add_argument("--output", dest="output_path", help="Output CSV path")
    grade.add_argument("--now", dest="now", help="Override evaluation time (ISO-8601)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "classify":
        return run_classify(
            top_name=args.top_name,
            top_wins=args.top_wins,
            bottom_name=args.bottom_name,
            bottom_wins=args.bottom_wins,
            next_game=getattr(args, "next_game", None),
            prediction=getattr(args, "prediction", None),
            now=getattr(args, "now", None),
            config_path=getattr(args, "config_path", None),
        )
    if args.command == "grade":
        return run_grade(
            input_path=args.input_path,
            output_path=getattr(args, "output_path", None),
            now=getattr(args, "now", None),
            config_path=getattr(args, "config_path", None),
        )
    parser.error(f"Unknown command: {args.command}")
    return EXIT_INVALID_INPUT


if __name__ == "__main__":
    raise SystemExit(main())
