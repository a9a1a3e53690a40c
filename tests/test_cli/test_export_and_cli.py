import csv

import pytest

from cournot_ga.cli import main
from cournot_ga.evolution.run import GenerationStats
from cournot_ga.export import load_statistics_csv, save_statistics_csv
from cournot_ga.utils.validation import StatisticsExportError


def test_save_statistics_writes_header_and_rows(tmp_path):
    path = tmp_path / "run.csv"
    stats = [GenerationStats(15360, 12.5), GenerationStats(15000, 0.0)]
    assert save_statistics_csv(stats, path) == 2
    with open(path, newline='') as f:
        rows = list(csv.reader(f))
    assert rows[0] == ['ind_out', 'var']
    assert rows[1] == ['15360', '12.5']
    assert load_statistics_csv(path) == stats


def test_save_statistics_reports_io_failure(tmp_path):
    with pytest.raises(StatisticsExportError):
        save_statistics_csv([GenerationStats(1, 0.0)], tmp_path / "missing" / "run.csv")


def test_load_statistics_reports_missing_file(tmp_path):
    with pytest.raises(StatisticsExportError):
        load_statistics_csv(tmp_path / "nope.csv")


def test_cli_writes_csv(tmp_path, capsys):
    out = tmp_path / "run_3.csv"
    code = main(["--iterations", "20", "--seed", "3", "--output", str(out)])
    assert code == 0
    assert "Successfully wrote to CSV" in capsys.readouterr().out
    stats = load_statistics_csv(out)
    assert len(stats) == 20


def test_cli_reports_write_failure(tmp_path, capsys):
    code = main(["--iterations", "2", "--seed", "1", "--output", str(tmp_path / "a" / "b.csv")])
    assert code == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_cli_rejects_bad_parameters(tmp_path, capsys):
    code = main(["--length", "4", "--z", "9", "--output", str(tmp_path / "x.csv")])
    assert code == 2
    assert "invalid_crossover_bits" in capsys.readouterr().out
