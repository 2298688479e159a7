"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Author columns are
named ``user_id`` in the database.
"""

from typing import Any, Dict
from uuid import UUID

from recipebox.domain.model import Comment, Like, Profile, Recipe
from recipebox.domain.value import (
    CachedCount,
    CommentId,
    LikeId,
    RecipeId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_recipe(row: Dict[str, Any]) -> Recipe:
    """Convert database row to Recipe domain model.

    Args:
        row: Database row as dict

    Returns:
        Recipe domain model
    """
    return Recipe(
        id=RecipeId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["user_id"])),
        like_count=CachedCount(row["like_count"]),
        comment_count=CachedCount(row["comment_count"]),
        created_at=row["created_at"],
    )


def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    """Convert Recipe domain model to database dict."""
    return {
        "id": recipe.id,
        "title": recipe.title,
        "user_id": recipe.author_id,
        "like_count": recipe.like_count.root,
        "comment_count": recipe.comment_count.root,
        "created_at": recipe.created_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        recipe_id=RecipeId(_uuid(row["recipe_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        recipe_id=RecipeId(_uuid(row["recipe_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "recipe_id": comment.recipe_id,
        "user_id": comment.author_id,
        "content": comment.content,
        "parent_id": comment.parent_id,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        full_name=row.get("full_name") or "",
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()
