"""Entry-point selection service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from openapi_pruner.reference_closure.closure_engine import ENTRY_POINTS_KEY, entry_point_table

from .entry_point_kinds import EntryPointKind

logger = logging.getLogger(__name__)


class InvalidArgumentsError(Exception):
    """Raised when a selection is requested without any names."""


def entry_point_key(name: str, kind: EntryPointKind) -> str:
    """Return the canonical entry-point key for a requested name."""
    return kind.key_for(name.strip())


def entry_point_keys(names: Sequence[str], kind: EntryPointKind) -> set[str]:
    """Return the target-key set for the requested names of one kind."""
    cleaned = _clean_names(names)
    if not cleaned:
        raise InvalidArgumentsError(f"At least one {kind.value} name is required.")
    return {entry_point_key(name, kind) for name in cleaned}


def select_roots(
    document: Mapping[str, Any], names: Sequence[str], kind: EntryPointKind
) -> dict[str, Any]:
    """Return a new document whose entry-point table only holds the requested entries."""
    return _with_entry_points(document, entry_point_keys(names, kind))


def select_entry_points(
    document: Mapping[str, Any],
    *,
    tables: Sequence[str] = (),
    functions: Sequence[str] = (),
) -> dict[str, Any]:
    """Return a new document keeping the requested tables and functions."""
    keep_keys: set[str] = set()
    for names, kind in ((tables, EntryPointKind.TABLE), (functions, EntryPointKind.FUNCTION)):
        if _clean_names(names):
            keep_keys |= entry_point_keys(names, kind)
    if not keep_keys:
        raise InvalidArgumentsError("At least one table or function name is required.")
    return _with_entry_points(document, keep_keys)


def _with_entry_points(document: Mapping[str, Any], keep_keys: set[str]) -> dict[str, Any]:
    current = entry_point_table(document)
    retained = {key: value for key, value in current.items() if key in keep_keys}
    logger.debug("Retained %d of %d entry points", len(retained), len(current))
    selected = dict(document)
    selected[ENTRY_POINTS_KEY] = retained
    return selected


def _clean_names(names: Iterable[str]) -> list[str]:
    return [name.strip() for name in names if isinstance(name, str) and name.strip()]
