"""Configuration scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from openapi_pruner.configuration import (
    build_placeholder_configuration,
    load_configuration,
    write_placeholder_configuration,
)


def test_scaffold_is_valid_yaml_with_documented_sections() -> None:
    text = build_placeholder_configuration()
    parsed = yaml.safe_load(text)

    assert set(parsed) == {"source", "output"}
    assert "SUPABASE_OPENAPI_URL" in text
    assert "OPENAPI_OUTPUT" in text


def test_written_scaffold_loads_as_configuration(tmp_path: Path) -> None:
    destination = write_placeholder_configuration(tmp_path / "openapi-pruner.yaml")

    configuration = load_configuration(destination, environ={})

    assert configuration.source.input_path == (tmp_path / "postgrest.openapi.json").resolve()
    assert configuration.output.path == (tmp_path / "postgrest.openapi.pruned.json").resolve()


def test_scaffold_refuses_to_overwrite_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "openapi-pruner.yaml"
    destination.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(destination)
    assert destination.read_text(encoding="utf-8") == "existing"
