"""Recipe entity.

Only the parts of a recipe the social layer touches: identity, ownership
and the two denormalized counters.
"""

from datetime import datetime

from pydantic import Field

from recipebox.domain.model.common import DomainModel
from recipebox.domain.value import CachedCount, CounterKind, RecipeId, UserId


class Recipe(DomainModel):
    """Recipe entity.

    ``like_count`` and ``comment_count`` are caches maintained by the count
    reconciler. They are hints; the likes and comments tables are the truth.
    """

    id: RecipeId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    like_count: CachedCount = CachedCount(0)
    comment_count: CachedCount = CachedCount(0)
    created_at: datetime = Field(default_factory=datetime.now)

    def cached(self, counter: CounterKind) -> CachedCount:
        """Return the cached value of a counter field."""
        if counter is CounterKind.LIKE_COUNT:
            return self.like_count
        return self.comment_count
