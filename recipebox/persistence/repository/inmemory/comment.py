"""In-memory comment repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from recipebox.domain.model import Comment
from recipebox.domain.repository import CommentRepository
from recipebox.domain.value import CommentId, RecipeId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID if it belongs to author_id."""
        comment = self._comments.get(comment_id)
        if comment and comment.author_id == author_id:
            return comment
        return None

    async def find_by_recipe(self, recipe_id: RecipeId) -> List[Comment]:
        """Find all comments for a recipe, oldest first."""
        # Stable sort keeps insertion order for equal timestamps
        comments = [c for c in self._comments.values() if c.recipe_id == recipe_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update content where both the comment ID and author match."""
        comment = await self.find_owned(comment_id, author_id)
        if not comment:
            return None

        updated = comment.model_copy(
            update={"content": content, "updated_at": updated_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete_owned(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Delete where both the comment ID and author match."""
        if not await self.find_owned(comment_id, author_id):
            return False
        del self._comments[comment_id]
        return True

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID."""
        deleted = 0
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                deleted += 1
        return deleted

    async def reparent_children(
        self, parent_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Move direct replies of parent_id under new_parent_id."""
        moved = 0
        for comment_id, comment in list(self._comments.items()):
            if comment.parent_id == parent_id:
                self._comments[comment_id] = comment.model_copy(
                    update={"parent_id": new_parent_id}
                )
                moved += 1
        return moved

    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count comments on a recipe."""
        return sum(1 for c in self._comments.values() if c.recipe_id == recipe_id)
