"""Reconcile counts use case."""

from dataclasses import replace
from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import CountReconciler, Reconciliation, RecipeService
from recipebox.domain.value import CounterKind, RecipeId


class ReconcileCountsRequest(BaseModel):
    """Reconcile counts request."""

    recipe_id: str | None = None  # None reconciles every recipe


class CounterResult(BaseModel):
    """Outcome for one counter on one recipe."""

    recipe_id: str
    counter: CounterKind
    value: int
    previous: int | None
    authoritative: bool
    persisted: bool


class ReconcileCountsResponse(BaseModel):
    """Reconcile counts response."""

    results: list[CounterResult]
    drifted: int  # Counters whose stored value was wrong
    failed: int  # Counters that could not be written


class ReconcileCountsUseCase(
    BaseUseCase[ReconcileCountsRequest, ReconcileCountsResponse]
):
    """Use case for bulk-repairing denormalized like and comment counters."""

    def __init__(
        self, count_reconciler: CountReconciler, recipe_service: RecipeService
    ) -> None:
        """Initialize reconcile counts use case.

        Args:
            count_reconciler: Count reconciler domain service
            recipe_service: Recipe domain service
        """
        self.count_reconciler = count_reconciler
        self.recipe_service = recipe_service

    async def execute(self, request: ReconcileCountsRequest) -> ReconcileCountsResponse:
        """Execute reconcile counts flow.

        Raises:
            NotFoundError: If a recipe_id is given and no such recipe exists
        """
        if request.recipe_id:
            recipe = await self.recipe_service.get_recipe_by_id(
                RecipeId(UUID(request.recipe_id))
            )
            outcomes = [
                replace(
                    await self.count_reconciler.reconcile(recipe.id, counter),
                    previous=recipe.cached(counter),
                )
                for counter in CounterKind
            ]
        else:
            outcomes = await self.count_reconciler.reconcile_all()

        return ReconcileCountsResponse(
            results=[_to_result(outcome) for outcome in outcomes],
            drifted=sum(1 for outcome in outcomes if outcome.drifted),
            failed=sum(1 for outcome in outcomes if not outcome.persisted),
        )


def _to_result(outcome: Reconciliation) -> CounterResult:
    return CounterResult(
        recipe_id=str(outcome.recipe_id),
        counter=outcome.counter,
        value=outcome.count.root,
        previous=outcome.previous.root if outcome.previous is not None else None,
        authoritative=outcome.authoritative,
        persisted=outcome.persisted,
    )
