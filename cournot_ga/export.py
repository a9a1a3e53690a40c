"""CSV persistence of the per-generation statistics stream."""

from __future__ import annotations

import csv
import os
from typing import Iterable

from cournot_ga.evolution.run import GenerationStats
from cournot_ga.utils.validation import StatisticsExportError

FIELDNAMES = ['ind_out', 'var']


def save_statistics_csv(statistics: Iterable[GenerationStats], path: str | os.PathLike) -> int:
    """Write one ``ind_out,var`` row per generation. Returns the number of rows."""
    rows = 0
    try:
        with open(path, 'w', newline='') as f:
            w = csv.DictWriter(f, fieldnames=FIELDNAMES)
            w.writeheader()
            for stats in statistics:
                w.writerow({'ind_out': stats.aggregate_value, 'var': repr(float(stats.variance))})
                rows += 1
    except OSError as exc:
        raise StatisticsExportError(path, exc.strerror or str(exc)) from exc
    return rows


def load_statistics_csv(path: str | os.PathLike) -> list[GenerationStats]:
    try:
        with open(path, newline='') as f:
            reader = csv.DictReader(f)
            return [GenerationStats(aggregate_value=int(row['ind_out']), variance=float(row['var'])) for row in reader]
    except OSError as exc:
        raise StatisticsExportError(path, exc.strerror or str(exc)) from exc


__all__ = ["FIELDNAMES", "save_statistics_csv", "load_statistics_csv"]
