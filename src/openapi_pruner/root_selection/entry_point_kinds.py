"""Root selection entities."""

from __future__ import annotations

from enum import Enum


class EntryPointKind(str, Enum):
    """How a requested name maps onto an entry-point key."""

    TABLE = "table"
    FUNCTION = "function"

    def key_for(self, name: str) -> str:
        if self is EntryPointKind.FUNCTION:
            return f"/rpc/{name}"
        return f"/{name}"
