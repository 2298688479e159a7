"""Domain model entities for recipebox."""

from recipebox.domain.model.comment import AuthoredComment, Comment
from recipebox.domain.model.like import Like
from recipebox.domain.model.profile import Profile
from recipebox.domain.model.recipe import Recipe

__all__ = [
    "Recipe",
    "Like",
    "Comment",
    "AuthoredComment",
    "Profile",
]
