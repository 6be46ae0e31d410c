"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PruneRequest:
    """Input contract for one pruning run."""

    schema: str | None
    target: str | None
    shared_name: str | None = None
    config_path: str | None = None

    def requested_name(self) -> str:
        """Name requested as both a table and a function entry point."""
        return (self.shared_name or "").strip() or (self.target or "").strip()


@dataclass(frozen=True)
class PruneOutcome:
    """Output contract for one completed run."""

    output_path: Path
    schema: str
    target: str
    kept_paths: int
    kept_definitions: int
