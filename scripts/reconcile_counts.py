#!/usr/bin/env python3
"""Recompute every recipe's like_count and comment_count from source rows.

Usage:
    python scripts/reconcile_counts.py              # all recipes
    python scripts/reconcile_counts.py <recipe-id>  # one recipe

Exits non-zero if any counter could not be written.
"""

import asyncio
import sys

import logfire

from recipebox.application.usecase.recipe import (
    ReconcileCountsRequest,
    ReconcileCountsUseCase,
)
from recipebox.config import Settings
from recipebox.domain.error import NotFoundError
from recipebox.util.di.container import create_script_container
from recipebox.util.logging import get_logger, setup_logging
from recipebox.util.observability import configure_logfire

logger = get_logger(__name__)


async def reconcile(recipe_id: str | None) -> int:
    """Run one reconciliation pass in its own request scope."""
    container = create_script_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ReconcileCountsUseCase)
            response = await use_case.execute(
                ReconcileCountsRequest(recipe_id=recipe_id)
            )
    except NotFoundError as e:
        logger.error(str(e))
        return 1
    finally:
        await container.close()

    for result in response.results:
        if result.previous is not None and result.previous != result.value:
            logger.info(
                "%s %s: %s -> %s",
                result.recipe_id,
                result.counter.value,
                result.previous,
                result.value,
            )

    logger.info(
        "Reconciled %d counters, %d drifted, %d failed",
        len(response.results),
        response.drifted,
        response.failed,
    )
    return 1 if response.failed else 0


def main() -> int:
    """Reconcile counters and report drift."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    recipe_id = sys.argv[1] if len(sys.argv) > 1 else None
    with logfire.span("scripts.reconcile_counts", recipe_id=recipe_id):
        return asyncio.run(reconcile(recipe_id))


if __name__ == "__main__":
    sys.exit(main())
