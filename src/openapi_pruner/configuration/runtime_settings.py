"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_PATH = "postgrest.openapi.json"
DEFAULT_OUTPUT_PATH = "postgrest.openapi.pruned.json"
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class SourceSettings:
    """Where the full API description document is acquired from."""

    input_path: Path
    url: str | None
    api_key: str | None
    timeout_seconds: int


@dataclass(frozen=True)
class OutputSettings:
    """Destination of the pruned document."""

    path: Path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    source: SourceSettings
    output: OutputSettings
