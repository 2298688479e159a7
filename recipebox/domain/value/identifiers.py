"""Strongly typed identifiers for recipebox domain entities."""

from typing import NewType
from uuid import UUID

RecipeId = NewType("RecipeId", UUID)
UserId = NewType("UserId", UUID)
LikeId = NewType("LikeId", UUID)
CommentId = NewType("CommentId", UUID)
