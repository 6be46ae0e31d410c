"""Root selection exports."""

from .entry_point_kinds import EntryPointKind
from .root_selector import (
    InvalidArgumentsError,
    entry_point_key,
    entry_point_keys,
    select_entry_points,
    select_roots,
)

__all__ = [
    "EntryPointKind",
    "InvalidArgumentsError",
    "entry_point_key",
    "entry_point_keys",
    "select_entry_points",
    "select_roots",
]
