"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from recipebox.application.usecase.comment import (
    MAX_REPLY_DEPTH,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from recipebox.domain.repository import CommentRepository, ProfileRepository
from recipebox.domain.value import CommentId, RecipeId, UserId
from tests.factories import make_comment, make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_nested_threads(self, unit_env):
        """Comments come back as chronological reply trees."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        recipe_id = RecipeId(uuid4())
        author = UserId(uuid4())
        await profile_repo.save(make_profile(author, "chef", "Julia Child"))

        a = await comment_repo.insert(make_comment(recipe_id, "A", author_id=author))
        b = await comment_repo.insert(make_comment(recipe_id, "B", parent_id=a.id, minutes=1))
        d = await comment_repo.insert(make_comment(recipe_id, "D", minutes=2))
        c = await comment_repo.insert(make_comment(recipe_id, "C", parent_id=b.id, minutes=3))

        # Act
        response = await use_case.execute(GetCommentsRequest(recipe_id=str(recipe_id)))

        # Assert
        assert [node.comment_id for node in response.comments] == [str(a.id), str(d.id)]
        root = response.comments[0]
        assert root.author.username == "chef"
        assert [reply.comment_id for reply in root.replies] == [str(b.id)]
        assert [reply.comment_id for reply in root.replies[0].replies] == [str(c.id)]
        assert response.comments[1].replies == []
        assert response.total == 4
        assert response.visible == 4

    @pytest.mark.asyncio
    async def test_orphaned_replies_hidden(self, unit_env):
        """Replies to a missing parent are counted in total but not shown."""
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        recipe_id = RecipeId(uuid4())

        await comment_repo.insert(make_comment(recipe_id, "root"))
        await comment_repo.insert(
            make_comment(recipe_id, "orphan", parent_id=CommentId(uuid4()), minutes=1)
        )

        response = await use_case.execute(GetCommentsRequest(recipe_id=str(recipe_id)))

        assert len(response.comments) == 1
        assert response.total == 2
        assert response.visible == 1

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env):
        """A recipe without comments returns an empty forest."""
        use_case = await unit_env.get(GetCommentsUseCase)
        recipe_id = str(uuid4())

        response = await use_case.execute(GetCommentsRequest(recipe_id=recipe_id))

        assert response.recipe_id == recipe_id
        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_deep_reply_chain(self, unit_env):
        """A long reply chain is returned whole with bounded nesting."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        recipe_id = RecipeId(uuid4())
        chain = []
        parent_id = None
        for i in range(2000):
            comment = await comment_repo.insert(
                make_comment(recipe_id, f"reply {i}", parent_id=parent_id, minutes=i)
            )
            chain.append(comment)
            parent_id = comment.id

        # Act
        response = await use_case.execute(GetCommentsRequest(recipe_id=str(recipe_id)))

        # Assert
        assert response.total == 2000
        assert response.visible == 2000

        node = response.comments[0]
        for _ in range(MAX_REPLY_DEPTH):
            assert len(node.replies) == 1
            node = node.replies[0]
        flattened = [reply.comment_id for reply in node.replies]
        assert flattened == [str(c.id) for c in chain[MAX_REPLY_DEPTH + 1 :]]
        assert all(reply.replies == [] for reply in node.replies)

        # Nesting is shallow enough to serialize
        assert response.model_dump_json()
