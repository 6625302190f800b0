"""Output writers for graded series."""

from seriespick.reporting.csv_output import write_results_csv

__all__ = ["write_results_csv"]
