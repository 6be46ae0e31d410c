"""Run execution domain exports."""

from .prune_run_use_case import RunExecutionError, execute_prune_run
from .run_contracts import PruneOutcome, PruneRequest

__all__ = [
    "PruneRequest",
    "PruneOutcome",
    "RunExecutionError",
    "execute_prune_run",
]
