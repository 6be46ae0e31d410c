"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from openapi_pruner.cli import main


def test_missing_target_reports_usage_without_traceback(capsys) -> None:
    exit_code = main(["prune", "public"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Usage: openapi-pruner prune SCHEMA" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["prune", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_acquisition_failure_returns_non_zero(tmp_path: Path, monkeypatch, capsys) -> None:
    for name in ("SUPABASE_OPENAPI_URL", "SUPABASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAPI_INPUT", str(tmp_path / "missing.json"))
    monkeypatch.setenv("OPENAPI_OUTPUT", str(tmp_path / "out.json"))

    exit_code = main(["prune", "public", "widgets"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "OpenAPI input file not found" in captured.err
    assert not (tmp_path / "out.json").exists()


def test_undecodable_input_returns_non_zero_without_traceback(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    for name in ("SUPABASE_OPENAPI_URL", "SUPABASE_URL"):
        monkeypatch.delenv(name, raising=False)
    input_path = tmp_path / "full.json"
    input_path.write_bytes(b'{"paths": {"\xff": 1}}')
    monkeypatch.setenv("OPENAPI_INPUT", str(input_path))
    monkeypatch.setenv("OPENAPI_OUTPUT", str(tmp_path / "out.json"))

    exit_code = main(["prune", "public", "widgets"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read OpenAPI input" in captured.err
    assert "Traceback" not in captured.err
    assert not (tmp_path / "out.json").exists()
