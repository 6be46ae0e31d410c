"""Internal reference classification."""

from __future__ import annotations

import re

from .closure_models import ReferenceTarget

INTERNAL_REFERENCE_PATTERN = re.compile(r"^#/components/([^/]+)/([^/]+)$")


def parse_reference(value: object) -> ReferenceTarget | None:
    """Return the referenced definition, or None when the value is not an internal reference."""
    if not isinstance(value, str):
        return None
    match = INTERNAL_REFERENCE_PATTERN.match(value)
    if match is None:
        return None
    category, name = match.groups()
    return ReferenceTarget(category=category, name=name)


def format_reference(target: ReferenceTarget) -> str:
    return f"#/components/{target.category}/{target.name}"
