"""End-to-end tests for the likes and comments endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from recipebox.config import Settings
from recipebox.domain.repository import RecipeRepository
from recipebox.domain.service import JWTService
from recipebox.interface.api.app import create_app
from recipebox.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import make_recipe


@pytest.fixture
def test_container():
    """Test container; its in-memory repositories live as long as the app."""
    return build_test_container()


@pytest.fixture
def client(test_container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def recipe_id(client, test_container) -> str:
    """ID of a recipe stored in the app's repository."""

    async def seed():
        recipe_repo = await test_container.get(RecipeRepository)
        return await recipe_repo.save(make_recipe())

    return str(client.portal.call(seed).id)


@pytest.fixture
def auth_token() -> str:
    """Token signed with the configured secret."""
    return JWTService(Settings().auth).create_token(str(uuid4()), "cook")


class TestLikeEndpoints:
    """End-to-end tests for like endpoints."""

    def test_toggle_like_without_auth(self, client, recipe_id):
        """Should return 401 with the login message."""
        response = client.post(f"/recipes/{recipe_id}/like")

        assert response.status_code == 401
        assert response.json()["detail"] == {
            "error": "auth_required",
            "message": "You must be logged in to like recipes",
        }

    def test_toggle_like(self, client, recipe_id, auth_token):
        """Should like the recipe and return the recomputed count."""
        response = client.post(
            f"/recipes/{recipe_id}/like", cookies={"auth_token": auth_token}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["recipe_id"] == recipe_id
        assert body["is_liked"] is True
        assert body["like_count"] == 1

    def test_toggle_twice_then_read(self, client, recipe_id, auth_token):
        """A second toggle unlikes; the status read agrees."""
        cookies = {"auth_token": auth_token}

        client.post(f"/recipes/{recipe_id}/like", cookies=cookies)
        second = client.post(f"/recipes/{recipe_id}/like", cookies=cookies)
        status = client.get(f"/recipes/{recipe_id}/like", cookies=cookies)

        assert second.json()["is_liked"] is False
        assert second.json()["like_count"] == 0
        assert status.json()["is_liked"] is False
        assert status.json()["like_count"] == 0

    def test_like_status_is_public(self, client, recipe_id):
        """Anonymous callers get the count and is_liked=false."""
        response = client.get(f"/recipes/{recipe_id}/like")

        assert response.status_code == 200
        assert response.json()["is_liked"] is False
        assert response.json()["like_count"] == 0

    def test_invalid_recipe_id(self, client, auth_token):
        """Should return 400 for a malformed recipe ID."""
        response = client.post(
            "/recipes/not-a-uuid/like", cookies={"auth_token": auth_token}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Invalid recipe ID"

    def test_unknown_recipe(self, client, auth_token):
        """Should return 404 for a recipe that does not exist."""
        missing = str(uuid4())

        toggled = client.post(
            f"/recipes/{missing}/like", cookies={"auth_token": auth_token}
        )
        status = client.get(f"/recipes/{missing}/like")

        assert toggled.status_code == 404
        assert toggled.json()["detail"] == {
            "error": "not_found",
            "message": f"Recipe not found: {missing}",
        }
        assert status.status_code == 404


class TestCommentEndpoints:
    """End-to-end tests for comment endpoints."""

    def test_list_comments_empty(self, client, recipe_id):
        """Should return an empty forest for a recipe without comments."""
        response = client.get(f"/recipes/{recipe_id}/comments")

        assert response.status_code == 200
        assert response.json()["comments"] == []
        assert response.json()["total"] == 0

    def test_create_comment(self, client, recipe_id, auth_token):
        """Should create a comment and return 201 with the new count."""
        response = client.post(
            f"/recipes/{recipe_id}/comments",
            json={"content": "  Lovely crumb  "},
            cookies={"auth_token": auth_token},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["comment"]["content"] == "Lovely crumb"
        assert body["comment"]["author"]["username"] == "Unknown"
        assert body["comment_count"] == 1

    def test_comment_then_list(self, client, recipe_id, auth_token):
        """A created comment shows up in the recipe's thread."""
        client.post(
            f"/recipes/{recipe_id}/comments",
            json={"content": "Lovely crumb"},
            cookies={"auth_token": auth_token},
        )

        response = client.get(f"/recipes/{recipe_id}/comments")

        assert response.json()["total"] == 1
        assert response.json()["comments"][0]["content"] == "Lovely crumb"

    def test_create_comment_on_unknown_recipe(self, client, auth_token):
        """Should return 404 and store nothing."""
        missing = str(uuid4())

        response = client.post(
            f"/recipes/{missing}/comments",
            json={"content": "hello"},
            cookies={"auth_token": auth_token},
        )
        listing = client.get(f"/recipes/{missing}/comments")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not_found"
        assert listing.status_code == 404

    def test_create_comment_without_auth(self, client, recipe_id):
        """Should return 401 when not authenticated."""
        response = client.post(
            f"/recipes/{recipe_id}/comments", json={"content": "hello"}
        )

        assert response.status_code == 401

    def test_create_empty_comment(self, client, recipe_id, auth_token):
        """Should return 400 for whitespace-only content."""
        response = client.post(
            f"/recipes/{recipe_id}/comments",
            json={"content": "   "},
            cookies={"auth_token": auth_token},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "validation"

    def test_edit_missing_comment(self, client, auth_token):
        """Should return 404 without revealing whether the comment exists."""
        response = client.patch(
            f"/comments/{uuid4()}",
            json={"content": "edited"},
            cookies={"auth_token": auth_token},
        )

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not_found_or_forbidden"

    def test_delete_missing_comment(self, client, auth_token):
        """Should return 404 for a comment the caller does not own."""
        response = client.delete(
            f"/comments/{uuid4()}", cookies={"auth_token": auth_token}
        )

        assert response.status_code == 404


def test_health(client):
    """Health endpoint responds without touching the store."""
    response = client.get("/health")

    assert response.status_code == 200
