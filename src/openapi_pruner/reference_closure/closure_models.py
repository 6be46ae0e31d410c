"""Reference closure entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReferenceTarget:
    """One definition addressed by an internal reference."""

    category: str
    name: str


class VisitedReferences:
    """Definitions confirmed reachable, grouped by category in discovery order."""

    def __init__(self) -> None:
        self._names_by_category: dict[str, dict[str, None]] = {}

    def add(self, target: ReferenceTarget) -> bool:
        """Record the target and return False when it was already visited."""
        names = self._names_by_category.setdefault(target.category, {})
        if target.name in names:
            return False
        names[target.name] = None
        return True

    def categories(self) -> tuple[str, ...]:
        return tuple(self._names_by_category)

    def names(self, category: str) -> tuple[str, ...]:
        return tuple(self._names_by_category.get(category, ()))

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, ReferenceTarget):
            return False
        return target.name in self._names_by_category.get(target.category, {})

    def __iter__(self) -> Iterator[ReferenceTarget]:
        for category, names in self._names_by_category.items():
            for name in names:
                yield ReferenceTarget(category=category, name=name)

    def __len__(self) -> int:
        return sum(len(names) for names in self._names_by_category.values())


@dataclass(frozen=True)
class ClosureResult:
    """Reachable definitions and the rebuilt definitions table."""

    visited: VisitedReferences
    definitions: Mapping[str, Mapping[str, Any]]
