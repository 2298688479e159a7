"""Get like status use case."""

from uuid import UUID

from pydantic import BaseModel

from recipebox.application.usecase.base import BaseUseCase
from recipebox.domain.service import LikeService
from recipebox.domain.value import RecipeId, UserId


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    recipe_id: str  # UUID string
    user_id: str | None = None  # None for anonymous viewers


class GetLikeStatusResponse(BaseModel):
    """Get like status response."""

    recipe_id: str
    is_liked: bool
    like_count: int
    count_authoritative: bool


class GetLikeStatusUseCase(
    BaseUseCase[GetLikeStatusRequest, GetLikeStatusResponse]
):
    """Use case for reading a recipe's like count and the viewer's like."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize get like status use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        state = await self.like_service.get_like_state(
            recipe_id=RecipeId(UUID(request.recipe_id)),
            user_id=UserId(UUID(request.user_id)) if request.user_id else None,
        )

        return GetLikeStatusResponse(
            recipe_id=request.recipe_id,
            is_liked=state.is_liked,
            like_count=state.like_count.root,
            count_authoritative=state.like_count.authoritative,
        )
