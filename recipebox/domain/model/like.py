"""Like entity.

A user likes a recipe at most once (enforced by a unique constraint on
recipe_id + user_id). Likes are created and deleted, never updated.
"""

from datetime import datetime

from pydantic import Field

from recipebox.domain.model.common import DomainModel
from recipebox.domain.value import LikeId, RecipeId, UserId


class Like(DomainModel):
    """Like entity."""

    id: LikeId
    recipe_id: RecipeId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
