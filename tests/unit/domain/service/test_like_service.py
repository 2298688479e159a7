"""Unit tests for LikeService."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from recipebox.domain.repository import LikeRepository, RecipeRepository
from recipebox.domain.service import CountReconciler, LikeService
from recipebox.domain.value import AuthoritativeCount, CounterKind, RecipeId, UserId
from recipebox.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryRecipeRepository,
)
from tests.factories import make_recipe
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class RacingLikeRepository(InMemoryLikeRepository):
    """Yields to the event loop after every lookup.

    Two toggles started together both see "no like yet" before either
    inserts, reproducing a double-click race.
    """

    async def find_one(self, recipe_id, user_id):
        existing = await super().find_one(recipe_id, user_id)
        await asyncio.sleep(0)
        return existing


class FailingInsertLikeRepository(InMemoryLikeRepository):
    """Like repository whose inserts fail at the store."""

    async def insert(self, like):
        raise OperationalError("INSERT INTO likes", None, Exception("timeout"))


class MissingRecipeLikeRepository(InMemoryLikeRepository):
    """Like repository whose inserts hit the recipe foreign key."""

    async def insert(self, like):
        raise IntegrityError(
            "INSERT INTO likes",
            None,
            Exception(
                "insert or update on table \"likes\" violates foreign key "
                "constraint \"likes_recipe_id_fkey\""
            ),
        )


def _service_with(like_repo: InMemoryLikeRepository) -> LikeService:
    reconciler = CountReconciler(
        InMemoryRecipeRepository(), like_repo, InMemoryCommentRepository()
    )
    return LikeService(like_repository=like_repo, count_reconciler=reconciler)


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        """Toggling with no existing like creates one."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(make_recipe())
        user_id = UserId(uuid4())

        # Act
        state = await like_service.toggle_like(recipe.id, user_id)

        # Assert
        assert state.is_liked is True
        assert state.like_count == AuthoritativeCount(1)
        stored = await recipe_repo.find_by_id(recipe.id)
        assert stored.like_count.root == 1

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes(self, unit_env):
        """Toggling again removes the like."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(make_recipe())
        user_id = UserId(uuid4())

        await like_service.toggle_like(recipe.id, user_id)
        state = await like_service.toggle_like(recipe.id, user_id)

        assert state.is_liked is False
        assert state.like_count.root == 0
        assert await like_repo.find_one(recipe.id, user_id) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("toggles", [1, 2, 3, 4, 5])
    async def test_odd_toggles_leave_one_row_even_leave_none(self, unit_env, toggles):
        """After n toggles exactly n % 2 like rows exist for the user."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        recipe_id = RecipeId(uuid4())
        user_id = UserId(uuid4())
        other_user = UserId(uuid4())

        # Act - interleave another user's like
        for i in range(toggles):
            await like_service.toggle_like(recipe_id, user_id)
            if i == 0:
                await like_service.toggle_like(recipe_id, other_user)

        # Assert
        mine = await like_repo.find_one(recipe_id, user_id)
        assert (mine is not None) == (toggles % 2 == 1)
        assert await like_repo.count_by_recipe(recipe_id) == toggles % 2 + 1

    @pytest.mark.asyncio
    async def test_two_users_then_unlike(self, unit_env):
        """U1 likes (1), U2 likes (2), U1 unlikes (1)."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(make_recipe())
        u1, u2 = UserId(uuid4()), UserId(uuid4())

        # Act
        first = await like_service.toggle_like(recipe.id, u1)
        second = await like_service.toggle_like(recipe.id, u2)
        third = await like_service.toggle_like(recipe.id, u1)

        # Assert
        assert (first.is_liked, first.like_count.root) == (True, 1)
        assert (second.is_liked, second.like_count.root) == (True, 2)
        assert (third.is_liked, third.like_count.root) == (False, 1)

    @pytest.mark.asyncio
    async def test_concurrent_double_toggle_keeps_one_row(self):
        """The uniqueness constraint, not a lock, prevents a second row."""
        # Arrange
        like_repo = RacingLikeRepository()
        like_service = _service_with(like_repo)
        recipe_id = RecipeId(uuid4())
        user_id = UserId(uuid4())

        # Act
        states = await asyncio.gather(
            like_service.toggle_like(recipe_id, user_id),
            like_service.toggle_like(recipe_id, user_id),
        )

        # Assert
        assert all(state.is_liked for state in states)
        assert all(state.like_count.root == 1 for state in states)
        assert await like_repo.count_by_recipe(recipe_id) == 1

    @pytest.mark.asyncio
    async def test_concurrent_likes_from_different_users(self):
        """Concurrent toggles by different users each add a row."""
        like_repo = RacingLikeRepository()
        like_service = _service_with(like_repo)
        recipe_id = RecipeId(uuid4())

        await asyncio.gather(
            *(like_service.toggle_like(recipe_id, UserId(uuid4())) for _ in range(5))
        )

        assert await like_repo.count_by_recipe(recipe_id) == 5

    @pytest.mark.asyncio
    async def test_counter_write_failure_does_not_fail_toggle(self):
        """The like still counts when the recipe counter can't be written."""
        like_repo = InMemoryLikeRepository()
        like_service = _service_with(like_repo)  # no recipe row to write to

        state = await like_service.toggle_like(RecipeId(uuid4()), UserId(uuid4()))

        assert state.is_liked is True
        assert state.like_count == AuthoritativeCount(1)

    @pytest.mark.asyncio
    async def test_insert_failure_propagates(self):
        """A failure on the like row itself is not swallowed."""
        like_service = _service_with(FailingInsertLikeRepository())

        with pytest.raises(OperationalError):
            await like_service.toggle_like(RecipeId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_foreign_key_violation_is_not_a_duplicate(self):
        """Only the unique_like constraint means "already liked"."""
        like_service = _service_with(MissingRecipeLikeRepository())

        with pytest.raises(IntegrityError, match="likes_recipe_id_fkey"):
            await like_service.toggle_like(RecipeId(uuid4()), UserId(uuid4()))


class TestGetLikeState:
    """Tests for get_like_state."""

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, unit_env):
        """Without a user the count is still returned."""
        like_service = await unit_env.get(LikeService)
        recipe_id = RecipeId(uuid4())
        await like_service.toggle_like(recipe_id, UserId(uuid4()))

        state = await like_service.get_like_state(recipe_id)

        assert state.is_liked is False
        assert state.like_count == AuthoritativeCount(1)

    @pytest.mark.asyncio
    async def test_reports_viewer_like(self, unit_env):
        """A user who liked the recipe sees is_liked."""
        like_service = await unit_env.get(LikeService)
        recipe_id = RecipeId(uuid4())
        user_id = UserId(uuid4())
        await like_service.toggle_like(recipe_id, user_id)

        state = await like_service.get_like_state(recipe_id, user_id)

        assert state.is_liked is True

    @pytest.mark.asyncio
    async def test_count_ignores_stale_cache(self, unit_env):
        """The read path counts rows instead of trusting like_count."""
        like_service = await unit_env.get(LikeService)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(make_recipe())
        await like_service.toggle_like(recipe.id, UserId(uuid4()))
        await recipe_repo.set_counter(recipe.id, CounterKind.LIKE_COUNT, 99)

        state = await like_service.get_like_state(recipe.id)

        assert state.like_count.root == 1
        assert state.like_count.authoritative
