"""Tests for the command-line interface."""

import sys

import pytest

from model_year_filters.cli import main


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["model-year-filters", *args])
    main()


def test_cli_writes_plan(monkeypatch, capsys, tmp_path, workbench_path):
    output_dir = tmp_path / "out"

    run_cli(monkeypatch, "--input", str(workbench_path), "--output-dir", str(output_dir))

    out = capsys.readouterr().out
    assert "Results saved to" in out
    assert (output_dir / "signalset_filter_plan.json").exists()
    assert (output_dir / "signalset_filter_plan.csv").exists()
    assert not (output_dir / "signalset_worksheets.xlsx").exists()


def test_cli_single_command(monkeypatch, capsys, workbench_path):
    run_cli(monkeypatch, "--input", str(workbench_path), "--command", "7E0.2210")

    out = capsys.readouterr().out
    assert "Command: 7E0.2210" in out
    assert "Supported years: 2018-2020, 2023-2025" in out
    assert 'Debug filter: { "years": [2021, 2022], "from": 2026 }' in out
    assert "Optimized filter: {}" in out


def test_cli_unknown_command(monkeypatch, capsys, workbench_path):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "--input", str(workbench_path), "--command", "7E0.9999")

    assert exc.value.code == 1
    assert "Unknown command" in capsys.readouterr().err


def test_cli_missing_input(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "--input", str(tmp_path / "missing.json"))

    assert exc.value.code == 1
    assert "could not load" in capsys.readouterr().err
