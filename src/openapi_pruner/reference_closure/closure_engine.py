"""Reference closure service.

Walks the retained entry points, follows every internal reference into the
definitions table until no new definition is discovered, and rebuilds a
definitions table holding only what was reached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .closure_models import ClosureResult, ReferenceTarget, VisitedReferences
from .reference_patterns import format_reference, parse_reference

logger = logging.getLogger(__name__)

_MISSING = object()

ENTRY_POINTS_KEY = "paths"
DEFINITIONS_KEY = "components"


def scan_references(
    node: Any, visited: VisitedReferences, queue: list[ReferenceTarget]
) -> None:
    """Record every not-yet-visited reference found in the node and queue it."""
    if isinstance(node, Mapping):
        for value in node.values():
            scan_references(value, visited, queue)
        return
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        for item in node:
            scan_references(item, visited, queue)
        return
    target = parse_reference(node)
    if target is not None and visited.add(target):
        logger.debug("Discovered reference %s", format_reference(target))
        queue.append(target)


def definitions_table(document: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the document's definitions table, treating a malformed one as empty."""
    definitions = document.get(DEFINITIONS_KEY)
    return definitions if isinstance(definitions, Mapping) else {}


def entry_point_table(document: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the document's entry-point table, treating a malformed one as empty."""
    entry_points = document.get(ENTRY_POINTS_KEY)
    return entry_points if isinstance(entry_points, Mapping) else {}


def compute_closure(
    document: Mapping[str, Any], entry_points: Mapping[str, Any]
) -> ClosureResult:
    """Compute the definitions transitively referenced from the entry points."""
    source_definitions = definitions_table(document)
    visited = VisitedReferences()
    queue: list[ReferenceTarget] = []
    scan_references(entry_points, visited, queue)

    while queue:
        target = queue.pop()
        definition = _lookup(source_definitions, target)
        if definition is _MISSING:
            logger.debug("Skipping dangling reference %s", format_reference(target))
            continue
        scan_references(definition, visited, queue)

    return ClosureResult(
        visited=visited,
        definitions=rebuild_definitions(source_definitions, visited),
    )


def rebuild_definitions(
    source_definitions: Mapping[str, Any], visited: VisitedReferences
) -> dict[str, dict[str, Any]]:
    """Copy visited definitions into a new table; empty categories are omitted."""
    rebuilt: dict[str, dict[str, Any]] = {}
    for category in visited.categories():
        source_category = source_definitions.get(category)
        if not isinstance(source_category, Mapping):
            continue
        kept = {
            name: source_category[name]
            for name in visited.names(category)
            if name in source_category
        }
        if kept:
            rebuilt[category] = kept
    return rebuilt


def prune_document(
    document: Mapping[str, Any], entry_points: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a new document holding the entry points and only the definitions they reach."""
    closure = compute_closure(document, entry_points)
    logger.debug(
        "Closure holds %d definitions across %d categories",
        len(closure.visited),
        len(closure.definitions),
    )
    pruned = dict(document)
    pruned[ENTRY_POINTS_KEY] = dict(entry_points)
    pruned[DEFINITIONS_KEY] = dict(closure.definitions)
    return pruned


def _lookup(definitions: Mapping[str, Any], target: ReferenceTarget) -> Any:
    category = definitions.get(target.category)
    if not isinstance(category, Mapping) or target.name not in category:
        return _MISSING
    return category[target.name]
