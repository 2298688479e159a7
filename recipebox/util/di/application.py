"""Application layer DI providers."""

from dishka import Scope, provide

from recipebox.adapter.cache import CacheInvalidator
from recipebox.adapter.ratelimit import AdmissionControl
from recipebox.application.facade import SocialFacade
from recipebox.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from recipebox.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from recipebox.application.usecase.recipe import ReconcileCountsUseCase
from recipebox.domain.service import (
    CommentService,
    CountReconciler,
    JWTService,
    LikeService,
    RecipeService,
)
from recipebox.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Recipe use cases
    @provide(scope=Scope.REQUEST)
    def get_reconcile_counts_use_case(
        self, count_reconciler: CountReconciler, recipe_service: RecipeService
    ) -> ReconcileCountsUseCase:
        """Provide reconcile counts use case."""
        return ReconcileCountsUseCase(
            count_reconciler=count_reconciler, recipe_service=recipe_service
        )

    # Façade
    @provide(scope=Scope.REQUEST)
    def get_social_facade(
        self,
        jwt_service: JWTService,
        recipe_service: RecipeService,
        admission_control: AdmissionControl,
        cache_invalidator: CacheInvalidator,
        toggle_like_use_case: ToggleLikeUseCase,
        get_like_status_use_case: GetLikeStatusUseCase,
        create_comment_use_case: CreateCommentUseCase,
        update_comment_use_case: UpdateCommentUseCase,
        delete_comment_use_case: DeleteCommentUseCase,
        get_comments_use_case: GetCommentsUseCase,
    ) -> SocialFacade:
        """Provide the social façade used by request handlers."""
        return SocialFacade(
            jwt_service=jwt_service,
            recipe_service=recipe_service,
            admission_control=admission_control,
            cache_invalidator=cache_invalidator,
            toggle_like_use_case=toggle_like_use_case,
            get_like_status_use_case=get_like_status_use_case,
            create_comment_use_case=create_comment_use_case,
            update_comment_use_case=update_comment_use_case,
            delete_comment_use_case=delete_comment_use_case,
            get_comments_use_case=get_comments_use_case,
        )
