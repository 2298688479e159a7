"""Test configuration and fixtures."""

from uuid import uuid4

import pytest

from recipebox.domain.value import RecipeId, UserId


@pytest.fixture
def recipe_id() -> RecipeId:
    return RecipeId(uuid4())


@pytest.fixture
def user_id() -> UserId:
    return UserId(uuid4())
