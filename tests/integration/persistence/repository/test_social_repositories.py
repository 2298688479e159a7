"""Integration tests for the PostgreSQL social repositories.

These tests verify constraint handling and savepoint isolation against a
real database.
"""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from recipebox.domain.model import Like
from recipebox.domain.repository import (
    UNIQUE_LIKE_CONSTRAINT,
    CommentRepository,
    LikeRepository,
    RecipeRepository,
)
from recipebox.domain.value import CounterKind, LikeId, RecipeId, UserId
from tests.factories import make_comment, make_recipe
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


def _like(recipe_id, user_id) -> Like:
    return Like(
        id=LikeId(uuid4()),
        recipe_id=recipe_id,
        user_id=user_id,
        created_at=datetime.now(),
    )


class TestLikeRepositoryIntegration:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_like_rejected_without_poisoning_session(
        self, integration_env
    ):
        """The unique constraint rejects a second like; the session stays usable."""
        # Arrange
        recipe_repo = await integration_env.get(RecipeRepository)
        like_repo = await integration_env.get(LikeRepository)
        recipe = await recipe_repo.save(make_recipe())
        user_id = UserId(uuid4())
        await like_repo.insert(_like(recipe.id, user_id))

        # Act
        with pytest.raises(IntegrityError):
            await like_repo.insert(_like(recipe.id, user_id))

        # Assert
        assert await like_repo.count_by_recipe(recipe.id) == 1
        assert await recipe_repo.set_counter(recipe.id, CounterKind.LIKE_COUNT, 1)
        stored = await recipe_repo.find_by_id(recipe.id)
        assert stored.like_count.root == 1

    @pytest.mark.asyncio
    async def test_constraint_violations_are_distinguishable(self, integration_env):
        """A duplicate names unique_like; a missing recipe does not."""
        recipe_repo = await integration_env.get(RecipeRepository)
        like_repo = await integration_env.get(LikeRepository)
        recipe = await recipe_repo.save(make_recipe())
        user_id = UserId(uuid4())
        await like_repo.insert(_like(recipe.id, user_id))

        with pytest.raises(IntegrityError) as duplicate:
            await like_repo.insert(_like(recipe.id, user_id))
        with pytest.raises(IntegrityError) as missing_recipe:
            await like_repo.insert(_like(RecipeId(uuid4()), user_id))

        assert UNIQUE_LIKE_CONSTRAINT in str(duplicate.value.orig)
        assert UNIQUE_LIKE_CONSTRAINT not in str(missing_recipe.value.orig)

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_was_removed(self, integration_env):
        recipe_repo = await integration_env.get(RecipeRepository)
        like_repo = await integration_env.get(LikeRepository)
        recipe = await recipe_repo.save(make_recipe())
        user_id = UserId(uuid4())
        await like_repo.insert(_like(recipe.id, user_id))

        assert await like_repo.delete(recipe.id, user_id) is True
        assert await like_repo.delete(recipe.id, user_id) is False
        assert await like_repo.find_one(recipe.id, user_id) is None


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_ownership_scoped_writes(self, integration_env):
        """Updates and deletes only match rows owned by the given author."""
        # Arrange
        recipe_repo = await integration_env.get(RecipeRepository)
        comment_repo = await integration_env.get(CommentRepository)
        recipe = await recipe_repo.save(make_recipe())
        author = UserId(uuid4())
        comment = await comment_repo.insert(
            make_comment(recipe.id, "original", author_id=author)
        )
        stranger = UserId(uuid4())

        # Act
        foreign_update = await comment_repo.update_content(
            comment.id, stranger, "hijacked", datetime.now()
        )
        foreign_delete = await comment_repo.delete_owned(comment.id, stranger)
        own_update = await comment_repo.update_content(
            comment.id, author, "edited", datetime.now()
        )

        # Assert
        assert foreign_update is None
        assert foreign_delete is False
        assert own_update.content == "edited"
        assert await comment_repo.delete_owned(comment.id, author) is True
        assert await comment_repo.count_by_recipe(recipe.id) == 0

    @pytest.mark.asyncio
    async def test_find_by_recipe_oldest_first(self, integration_env):
        recipe_repo = await integration_env.get(RecipeRepository)
        comment_repo = await integration_env.get(CommentRepository)
        recipe = await recipe_repo.save(make_recipe())

        later = await comment_repo.insert(make_comment(recipe.id, "later", minutes=5))
        earlier = await comment_repo.insert(make_comment(recipe.id, "earlier"))

        comments = await comment_repo.find_by_recipe(recipe.id)

        assert [c.id for c in comments] == [earlier.id, later.id]

    @pytest.mark.asyncio
    async def test_reparent_children(self, integration_env):
        recipe_repo = await integration_env.get(RecipeRepository)
        comment_repo = await integration_env.get(CommentRepository)
        recipe = await recipe_repo.save(make_recipe())
        root = await comment_repo.insert(make_comment(recipe.id, "root"))
        reply = await comment_repo.insert(
            make_comment(recipe.id, "reply", parent_id=root.id, minutes=1)
        )

        moved = await comment_repo.reparent_children(root.id, None)

        assert moved == 1
        assert (await comment_repo.find_by_id(reply.id)).parent_id is None
