"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import LikeService
from recipebox.domain.value import RecipeId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    recipe_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    recipe_id: str
    is_liked: bool
    like_count: int
    count_authoritative: bool


class ToggleLikeUseCase(
    BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]
):
    """Use case for liking or unliking a recipe."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            New like state and the recomputed like count
        """
        state = await self.like_service.toggle_like(
            recipe_id=RecipeId(UUID(request.recipe_id)),
            user_id=UserId(UUID(request.user_id)),
        )

        return ToggleLikeResponse(
            recipe_id=request.recipe_id,
            is_liked=state.is_liked,
            like_count=state.like_count.root,
            count_authoritative=state.like_count.authoritative,
        )
