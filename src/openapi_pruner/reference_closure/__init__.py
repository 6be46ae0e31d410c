"""Reference closure exports."""

from .closure_engine import (
    compute_closure,
    definitions_table,
    entry_point_table,
    prune_document,
    rebuild_definitions,
    scan_references,
)
from .closure_models import ClosureResult, ReferenceTarget, VisitedReferences
from .reference_patterns import format_reference, parse_reference

__all__ = [
    "ClosureResult",
    "ReferenceTarget",
    "VisitedReferences",
    "compute_closure",
    "definitions_table",
    "entry_point_table",
    "format_reference",
    "parse_reference",
    "prune_document",
    "rebuild_definitions",
    "scan_references",
]
