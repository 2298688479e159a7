"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from recipebox.domain.model.comment import Comment
from recipebox.domain.value import CommentId, RecipeId, UserId


class CommentRepository(ABC):
    """Repository for the Comment entity.

    Writes by authors are ownership-scoped: the author ID is part of the
    filter, so a non-matching author simply matches no row.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID if it belongs to the given author.

        Args:
            comment_id: The comment ID
            author_id: The expected author

        Returns:
            The comment if it exists and is owned by author_id, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipe(self, recipe_id: RecipeId) -> List[Comment]:
        """Find all comments for a recipe, oldest first.

        Args:
            recipe_id: The recipe ID

        Returns:
            Comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: str,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Update a comment's content, scoped to its author.

        Args:
            comment_id: The comment ID
            author_id: The author performing the edit
            content: New content
            updated_at: Edit timestamp

        Returns:
            The updated comment, or None if no row matched both IDs
        """
        pass

    @abstractmethod
    async def delete_owned(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Delete a comment, scoped to its author.

        Args:
            comment_id: The comment ID
            author_id: The author performing the delete

        Returns:
            True if a row was deleted, False if none matched both IDs
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments by ID regardless of author.

        Used by the cascade reply policy.

        Args:
            comment_ids: Comments to delete

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def reparent_children(
        self, parent_id: CommentId, new_parent_id: Optional[CommentId]
    ) -> int:
        """Point every direct reply of parent_id at new_parent_id.

        Args:
            parent_id: The comment whose replies move
            new_parent_id: New parent (None makes them root comments)

        Returns:
            Number of replies moved
        """
        pass

    @abstractmethod
    async def count_by_recipe(self, recipe_id: RecipeId) -> int:
        """Count comments on a recipe.

        Args:
            recipe_id: The recipe ID

        Returns:
            Number of comment rows
        """
        pass
