"""Pruning run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from openapi_pruner.configuration import ConfigurationError, load_configuration
from openapi_pruner.document_acquisition import AcquisitionError, build_document_source
from openapi_pruner.document_acquisition.document_sources import HTTPSession
from openapi_pruner.document_persistence import PersistenceError, save_document
from openapi_pruner.reference_closure import definitions_table, entry_point_table, prune_document
from openapi_pruner.root_selection import InvalidArgumentsError, select_entry_points

from .run_contracts import PruneOutcome, PruneRequest

logger = logging.getLogger(__name__)

USAGE = "Usage: openapi-pruner prune SCHEMA TABLE_OR_FUNCTION [SHARED_NAME]"


class RunExecutionError(Exception):
    """Raised when a pruning run cannot be completed."""


def execute_prune_run(
    request: PruneRequest,
    *,
    environ: Mapping[str, str] | None = None,
    session: HTTPSession | None = None,
) -> PruneOutcome:
    """Load, prune and save one API description document."""
    schema, target = _validate_request(request)
    name = request.requested_name()

    try:
        configuration = load_configuration(request.config_path, environ=environ)
        source = build_document_source(configuration.source, schema=schema, session=session)
        document = source.load_document()
    except (ConfigurationError, AcquisitionError) as exc:
        raise RunExecutionError(str(exc)) from exc

    selected = select_entry_points(document, tables=[name], functions=[name])
    entry_points = entry_point_table(selected)
    pruned = prune_document(selected, entry_points)
    kept_definitions = sum(len(names) for names in definitions_table(pruned).values())
    logger.info(
        "Kept %d entry points and %d definitions for %s",
        len(entry_points),
        kept_definitions,
        name,
    )

    try:
        output_path = save_document(pruned, configuration.output.path)
    except PersistenceError as exc:
        raise RunExecutionError(str(exc)) from exc
    logger.info("Wrote pruned document to %s", output_path)

    return PruneOutcome(
        output_path=output_path,
        schema=schema,
        target=target,
        kept_paths=len(entry_points),
        kept_definitions=kept_definitions,
    )


def _validate_request(request: PruneRequest) -> tuple[str, str]:
    schema = (request.schema or "").strip()
    target = (request.target or "").strip()
    if not schema or not target or not request.requested_name():
        raise InvalidArgumentsError(USAGE)
    return schema, target
