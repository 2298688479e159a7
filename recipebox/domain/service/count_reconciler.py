"""Count reconciler.

Recomputes a recipe's denormalized counters from the rows they summarize
and writes the result back. Runs after every like/comment mutation; counters
are never incremented or decremented in place. Idempotent.

No lock is held between the count and the write. A mutation that commits
in between can leave the field off by one until the next reconciliation;
callers always receive the computed count, never the stored field.
"""

from dataclasses import dataclass

import logfire
from sqlalchemy.exc import SQLAlchemyError

from recipebox.domain.repository import (
    CommentRepository,
    LikeRepository,
    RecipeRepository,
)
from recipebox.domain.value import (
    AuthoritativeCount,
    CachedCount,
    CounterKind,
    RecipeId,
)

from .base import Service


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of reconciling one counter.

    ``count`` is an AuthoritativeCount unless the source rows could not be
    counted, in which case it is the best available CachedCount.
    """

    recipe_id: RecipeId
    counter: CounterKind
    count: AuthoritativeCount | CachedCount
    persisted: bool
    previous: CachedCount | None = None

    @property
    def authoritative(self) -> bool:
        return self.count.authoritative

    @property
    def drifted(self) -> bool:
        """Whether the stored field disagreed with the computed count."""
        return self.previous is not None and self.previous.root != self.count.root


class CountReconciler(Service):
    """Domain service that keeps recipe counters in line with source rows."""

    def __init__(
        self,
        recipe_repository: RecipeRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize count reconciler.

        Args:
            recipe_repository: Recipe repository (counter fields)
            like_repository: Like repository (like_count source)
            comment_repository: Comment repository (comment_count source)
        """
        self.recipe_repository = recipe_repository
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def count(self, recipe_id: RecipeId, counter: CounterKind) -> AuthoritativeCount:
        """Count the source rows behind a counter.

        Raises:
            SQLAlchemyError: If the store cannot be read
        """
        if counter is CounterKind.LIKE_COUNT:
            value = await self.like_repository.count_by_recipe(recipe_id)
        else:
            value = await self.comment_repository.count_by_recipe(recipe_id)
        return AuthoritativeCount(value)

    async def reconcile(
        self, recipe_id: RecipeId, counter: CounterKind
    ) -> Reconciliation:
        """Recompute a counter and persist it.

        Never raises for store failures: the mutation that triggered the
        reconciliation has already happened and must not be reported as
        failed because its cache could not be refreshed.

        Args:
            recipe_id: Recipe whose counter to refresh
            counter: Which counter

        Returns:
            Reconciliation with the computed count and whether it was written
        """
        with logfire.span(
            "count_reconciler.reconcile",
            recipe_id=str(recipe_id),
            counter=counter.value,
        ):
            try:
                count = await self.count(recipe_id, counter)
            except SQLAlchemyError as e:
                logfire.error(
                    "Counter source rows could not be counted",
                    recipe_id=str(recipe_id),
                    counter=counter.value,
                    source=counter.source,
                    error=str(e),
                )
                return Reconciliation(
                    recipe_id=recipe_id,
                    counter=counter,
                    count=await self._cached_fallback(recipe_id, counter),
                    persisted=False,
                )

            persisted = await self._write(recipe_id, counter, count)
            return Reconciliation(
                recipe_id=recipe_id,
                counter=counter,
                count=count,
                persisted=persisted,
            )

    async def reconcile_all(self) -> list[Reconciliation]:
        """Reconcile both counters on every recipe.

        Returns:
            One Reconciliation per recipe and counter, with the previously
            stored value so drift can be reported
        """
        with logfire.span("count_reconciler.reconcile_all"):
            recipes = await self.recipe_repository.list_all()
            results: list[Reconciliation] = []
            for recipe in recipes:
                for counter in CounterKind:
                    outcome = await self.reconcile(recipe.id, counter)
                    results.append(
                        Reconciliation(
                            recipe_id=outcome.recipe_id,
                            counter=outcome.counter,
                            count=outcome.count,
                            persisted=outcome.persisted,
                            previous=recipe.cached(counter),
                        )
                    )

            logfire.info(
                "Counters reconciled",
                recipes=len(recipes),
                drifted=sum(1 for r in results if r.drifted),
                failed=sum(1 for r in results if not r.persisted),
            )
            return results

    async def _write(
        self, recipe_id: RecipeId, counter: CounterKind, count: AuthoritativeCount
    ) -> bool:
        try:
            updated = await self.recipe_repository.set_counter(
                recipe_id, counter, count.root
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Counter write failed, cached value is stale until next reconciliation",
                recipe_id=str(recipe_id),
                counter=counter.value,
                computed=count.root,
                error=str(e),
            )
            return False

        if not updated:
            logfire.warn(
                "Counter write matched no recipe",
                recipe_id=str(recipe_id),
                counter=counter.value,
            )
            return False

        logfire.info(
            "Counter reconciled",
            recipe_id=str(recipe_id),
            counter=counter.value,
            value=count.root,
        )
        return True

    async def _cached_fallback(
        self, recipe_id: RecipeId, counter: CounterKind
    ) -> CachedCount:
        try:
            recipe = await self.recipe_repository.find_by_id(recipe_id)
        except SQLAlchemyError as e:
            logfire.error(
                "Cached counter unavailable", recipe_id=str(recipe_id), error=str(e)
            )
            return CachedCount(0)
        return recipe.cached(counter) if recipe else CachedCount(0)
