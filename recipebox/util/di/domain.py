"""Domain layer DI providers."""

from dishka import Scope, provide

from recipebox.config import AuthSettings, SocialSettings
from recipebox.domain.repository import (
    CommentRepository,
    LikeRepository,
    ProfileRepository,
    RecipeRepository,
)
from recipebox.domain.service import (
    CommentService,
    CountReconciler,
    JWTService,
    LikeService,
    RecipeService,
)
from recipebox.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_count_reconciler(
        self,
        recipe_repository: RecipeRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> CountReconciler:
        """Provide count reconciler."""
        return CountReconciler(
            recipe_repository=recipe_repository,
            like_repository=like_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, count_reconciler: CountReconciler
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, count_reconciler=count_reconciler
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        count_reconciler: CountReconciler,
        social_settings: SocialSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
            count_reconciler=count_reconciler,
            social_settings=social_settings,
        )

    @provide
    def get_recipe_service(self, recipe_repository: RecipeRepository) -> RecipeService:
        """Provide recipe domain service."""
        return RecipeService(recipe_repository=recipe_repository)
