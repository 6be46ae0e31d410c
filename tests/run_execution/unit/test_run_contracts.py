"""Run execution contract tests."""

from __future__ import annotations

from openapi_pruner.run_execution import PruneRequest


def test_requested_name_defaults_to_target() -> None:
    request = PruneRequest(schema="public", target=" widgets ")

    assert request.requested_name() == "widgets"


def test_shared_name_replaces_target_for_both_kinds() -> None:
    request = PruneRequest(schema="public", target="widgets", shared_name="gadgets")

    assert request.requested_name() == "gadgets"


def test_blank_shared_name_falls_back_to_target() -> None:
    request = PruneRequest(schema="public", target="widgets", shared_name="   ")

    assert request.requested_name() == "widgets"
