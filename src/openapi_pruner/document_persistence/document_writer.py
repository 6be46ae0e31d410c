"""Pruned document persistence."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


class PersistenceError(Exception):
    """Raised when the pruned document cannot be written."""


def render_document(document: Mapping[str, Any]) -> str:
    """Return the document as pretty-printed JSON text."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def save_document(document: Mapping[str, Any], output_path: Path | str) -> Path:
    """Write the document and return the resolved destination path."""
    destination = Path(output_path)
    text = render_document(document)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Failed to write pruned document {destination}: {exc}") from exc
    return destination.resolve()
