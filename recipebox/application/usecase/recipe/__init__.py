"""Recipe use cases."""

from .reconcile_counts import (
    CounterResult,
    ReconcileCountsRequest,
    ReconcileCountsResponse,
    ReconcileCountsUseCase,
)

__all__ = [
    "CounterResult",
    "ReconcileCountsRequest",
    "ReconcileCountsResponse",
    "ReconcileCountsUseCase",
]
