"""Like domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from recipebox.domain.model.like import Like
from recipebox.domain.repository import UNIQUE_LIKE_CONSTRAINT, LikeRepository
from recipebox.domain.value import (
    AuthoritativeCount,
    CachedCount,
    CounterKind,
    LikeId,
    RecipeId,
    UserId,
)

from .base import Service
from .count_reconciler import CountReconciler


@dataclass(frozen=True)
class LikeState:
    """A user's like state on a recipe plus the recipe's like count."""

    is_liked: bool
    like_count: AuthoritativeCount | CachedCount


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        count_reconciler: CountReconciler,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            count_reconciler: Reconciler for the recipe like counter
        """
        self.like_repository = like_repository
        self.count_reconciler = count_reconciler

    async def toggle_like(self, recipe_id: RecipeId, user_id: UserId) -> LikeState:
        """Flip a user's like on a recipe.

        Reads the current state and inverts it, so a retried request flips
        again. The store's unique constraint on (recipe_id, user_id) is what
        keeps concurrent toggles from creating two rows.

        Args:
            recipe_id: Recipe ID
            user_id: User ID

        Returns:
            New like state with a freshly computed like count
        """
        with logfire.span(
            "like_service.toggle_like", recipe_id=str(recipe_id), user_id=str(user_id)
        ):
            existing = await self.like_repository.find_one(recipe_id, user_id)

            if existing:
                deleted = await self.like_repository.delete(recipe_id, user_id)
                if not deleted:
                    logfire.warn(
                        "Like already removed by a concurrent request",
                        recipe_id=str(recipe_id),
                        user_id=str(user_id),
                    )
                is_liked = False
            else:
                like = Like(
                    id=LikeId(uuid4()),
                    recipe_id=recipe_id,
                    user_id=user_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.like_repository.insert(like)
                except IntegrityError as e:
                    if UNIQUE_LIKE_CONSTRAINT not in str(e.orig):
                        raise
                    logfire.warn(
                        "Duplicate like rejected by unique constraint",
                        recipe_id=str(recipe_id),
                        user_id=str(user_id),
                    )
                is_liked = True

            reconciliation = await self.count_reconciler.reconcile(
                recipe_id, CounterKind.LIKE_COUNT
            )
            logfire.info(
                "Like toggled",
                recipe_id=str(recipe_id),
                user_id=str(user_id),
                is_liked=is_liked,
                like_count=reconciliation.count.root,
                counter_persisted=reconciliation.persisted,
            )
            return LikeState(is_liked=is_liked, like_count=reconciliation.count)

    async def get_like_state(
        self, recipe_id: RecipeId, user_id: UserId | None = None
    ) -> LikeState:
        """Read whether a user likes a recipe and the current like count.

        Args:
            recipe_id: Recipe ID
            user_id: User ID, or None for anonymous viewers

        Returns:
            Like state with a count computed from the likes table
        """
        with logfire.span(
            "like_service.get_like_state",
            recipe_id=str(recipe_id),
            user_id=str(user_id) if user_id else None,
        ):
            is_liked = False
            if user_id:
                is_liked = (
                    await self.like_repository.find_one(recipe_id, user_id)
                ) is not None

            count = await self.count_reconciler.count(recipe_id, CounterKind.LIKE_COUNT)
            return LikeState(is_liked=is_liked, like_count=count)
