"""Unit tests for ReconcileCountsUseCase."""

from uuid import uuid4

import pytest

from recipebox.application.usecase.recipe import (
    ReconcileCountsRequest,
    ReconcileCountsUseCase,
)
from recipebox.domain.error import NotFoundError
from recipebox.domain.model import Like
from recipebox.domain.repository import (
    CommentRepository,
    LikeRepository,
    RecipeRepository,
)
from recipebox.domain.value import CachedCount, CounterKind, LikeId, UserId
from tests.factories import make_comment, make_recipe
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReconcileCountsUseCase:
    """Tests for ReconcileCountsUseCase."""

    @pytest.mark.asyncio
    async def test_repairs_drifted_counters(self, unit_env):
        """Stored counters are overwritten with counts from source rows."""
        # Arrange
        use_case = await unit_env.get(ReconcileCountsUseCase)
        recipe_repo = await unit_env.get(RecipeRepository)
        like_repo = await unit_env.get(LikeRepository)
        comment_repo = await unit_env.get(CommentRepository)

        drifted = await recipe_repo.save(
            make_recipe().model_copy(
                update={"like_count": CachedCount(7), "comment_count": CachedCount(0)}
            )
        )
        clean = await recipe_repo.save(make_recipe())
        await like_repo.insert(
            Like(id=LikeId(uuid4()), recipe_id=drifted.id, user_id=UserId(uuid4()))
        )
        await comment_repo.insert(make_comment(drifted.id))

        # Act
        response = await use_case.execute(ReconcileCountsRequest())

        # Assert
        assert len(response.results) == 4
        assert response.drifted == 2
        assert response.failed == 0

        by_key = {(r.recipe_id, r.counter): r for r in response.results}
        likes = by_key[(str(drifted.id), CounterKind.LIKE_COUNT)]
        assert (likes.previous, likes.value) == (7, 1)
        assert by_key[(str(clean.id), CounterKind.LIKE_COUNT)].value == 0

        stored = await recipe_repo.find_by_id(drifted.id)
        assert stored.like_count.root == 1
        assert stored.comment_count.root == 1

    @pytest.mark.asyncio
    async def test_single_recipe(self, unit_env):
        """A recipe_id limits reconciliation to that recipe's two counters."""
        use_case = await unit_env.get(ReconcileCountsUseCase)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(make_recipe())
        await recipe_repo.save(make_recipe())

        response = await use_case.execute(
            ReconcileCountsRequest(recipe_id=str(recipe.id))
        )

        assert {r.counter for r in response.results} == set(CounterKind)
        assert all(r.recipe_id == str(recipe.id) for r in response.results)
        assert all(r.persisted and r.authoritative for r in response.results)

    @pytest.mark.asyncio
    async def test_single_recipe_reports_drift(self, unit_env):
        """Single-recipe runs compare against the stored counters too."""
        use_case = await unit_env.get(ReconcileCountsUseCase)
        recipe_repo = await unit_env.get(RecipeRepository)
        recipe = await recipe_repo.save(
            make_recipe().model_copy(update={"comment_count": CachedCount(3)})
        )

        response = await use_case.execute(
            ReconcileCountsRequest(recipe_id=str(recipe.id))
        )

        assert response.drifted == 1
        comments = next(
            r for r in response.results if r.counter is CounterKind.COMMENT_COUNT
        )
        assert (comments.previous, comments.value) == (3, 0)

    @pytest.mark.asyncio
    async def test_unknown_recipe(self, unit_env):
        """Reconciling a recipe that does not exist is an error."""
        use_case = await unit_env.get(ReconcileCountsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ReconcileCountsRequest(recipe_id=str(uuid4())))
