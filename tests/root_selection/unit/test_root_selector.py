"""Entry-point selection tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest
from openapi_pruner.root_selection import (
    EntryPointKind,
    InvalidArgumentsError,
    entry_point_key,
    select_entry_points,
    select_roots,
)


def _document() -> dict[str, Any]:
    return {
        "swagger": "2.0",
        "paths": {
            "/": {"get": {}},
            "/widgets": {"get": {"summary": "widgets"}},
            "/rpc/widgets": {"post": {"summary": "widgets rpc"}},
            "/gadgets": {"get": {}},
            "/rpc/refresh": {"post": {}},
        },
        "components": {"schemas": {"Widget": {}}},
    }


def test_entry_point_key_uses_rpc_prefix_for_functions() -> None:
    assert entry_point_key("widgets", EntryPointKind.TABLE) == "/widgets"
    assert entry_point_key("refresh", EntryPointKind.FUNCTION) == "/rpc/refresh"
    assert entry_point_key(" padded ", EntryPointKind.TABLE) == "/padded"


def test_select_roots_keeps_only_matching_tables() -> None:
    selected = select_roots(_document(), ["widgets"], EntryPointKind.TABLE)

    assert selected["paths"] == {"/widgets": {"get": {"summary": "widgets"}}}
    assert selected["components"] == _document()["components"]
    assert selected["swagger"] == "2.0"


def test_select_roots_keeps_only_matching_functions() -> None:
    selected = select_roots(_document(), ["refresh", "widgets"], EntryPointKind.FUNCTION)

    assert list(selected["paths"]) == ["/rpc/widgets", "/rpc/refresh"]


def test_select_entry_points_preserves_document_order() -> None:
    selected = select_entry_points(
        _document(), tables=["gadgets", "widgets"], functions=["widgets"]
    )

    assert list(selected["paths"]) == ["/widgets", "/rpc/widgets", "/gadgets"]


def test_unmatched_names_yield_empty_entry_point_table() -> None:
    selected = select_entry_points(_document(), tables=["missing"], functions=["missing"])

    assert selected["paths"] == {}


def test_selection_does_not_mutate_source_document() -> None:
    document = _document()
    snapshot = copy.deepcopy(document)

    select_entry_points(document, tables=["widgets"])

    assert document == snapshot


def test_document_without_entry_points_is_tolerated() -> None:
    selected = select_roots({"components": {}}, ["widgets"], EntryPointKind.TABLE)

    assert selected["paths"] == {}


@pytest.mark.parametrize("names", [[], [""], ["   "]])
def test_select_roots_requires_names(names: list[str]) -> None:
    with pytest.raises(InvalidArgumentsError, match="table name is required"):
        select_roots(_document(), names, EntryPointKind.TABLE)


def test_select_entry_points_requires_at_least_one_kind() -> None:
    with pytest.raises(InvalidArgumentsError):
        select_entry_points(_document(), tables=[], functions=[" "])


def test_select_entry_points_accepts_a_single_kind() -> None:
    selected = select_entry_points(_document(), functions=["refresh"])

    assert list(selected["paths"]) == ["/rpc/refresh"]
