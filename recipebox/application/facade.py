"""Social façade.

The single entry point request handlers use for likes and comments. Every
operation returns a Success or a Failure; no exception crosses this
boundary.

Mutations run in a fixed order: authenticate, validate input, check that
the target recipe exists, consult admission control, run the use case, then
invalidate downstream caches.
"""

from typing import Awaitable, Callable, Sequence, TypeVar
from uuid import UUID

import logfire
from sqlalchemy.exc import SQLAlchemyError

from recipebox.adapter.cache import CacheInvalidator
from recipebox.adapter.error import CacheInvalidationError
from recipebox.adapter.ratelimit import AdmissionAction, AdmissionControl
from recipebox.application.result import ErrorKind, Failure, Success
from recipebox.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from recipebox.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from recipebox.domain.error import (
    AuthRequiredError,
    NotFoundError,
    NotFoundOrForbiddenError,
    RateLimitedError,
    ValidationError,
)
from recipebox.domain.service import JWTService, RecipeService
from recipebox.domain.value import CommentContent, RecipeId

T = TypeVar("T")

RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."


def like_paths(recipe_id: str) -> list[str]:
    """Pages that show a recipe's like state."""
    return [f"/recipes/{recipe_id}", "/dashboard", "/my-recipes", "/recipes"]


def comment_paths(recipe_id: str) -> list[str]:
    """Pages that show a recipe's comments."""
    return [f"/recipes/{recipe_id}"]


class SocialFacade:
    """Request-facing boundary for the social engine."""

    def __init__(
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
    ) -> None:
        """Initialize social façade.

        Args:
            jwt_service: Verifies the caller's identity token
            recipe_service: Looks up the recipe an operation targets
            admission_control: Rate limiter consulted before every mutation
            cache_invalidator: Downstream page cache
            toggle_like_use_case: Toggle like use case
            get_like_status_use_case: Like status use case
            create_comment_use_case: Create comment use case
            update_comment_use_case: Update comment use case
            delete_comment_use_case: Delete comment use case
            get_comments_use_case: Comment tree use case
        """
        self.jwt_service = jwt_service
        self.recipe_service = recipe_service
        self.admission_control = admission_control
        self.cache_invalidator = cache_invalidator
        self.toggle_like_use_case = toggle_like_use_case
        self.get_like_status_use_case = get_like_status_use_case
        self.create_comment_use_case = create_comment_use_case
        self.update_comment_use_case = update_comment_use_case
        self.delete_comment_use_case = delete_comment_use_case
        self.get_comments_use_case = get_comments_use_case

    async def toggle_like(
        self, recipe_id: str, auth_token: str | None
    ) -> Success[ToggleLikeResponse] | Failure:
        """Like the recipe if the caller has not, otherwise unlike it."""

        async def run() -> ToggleLikeResponse:
            user_id = self._require_user(
                auth_token, "You must be logged in to like recipes"
            )
            await self._require_recipe(recipe_id)
            self._admit(AdmissionAction.LIKE, user_id)

            response = await self.toggle_like_use_case.execute(
                ToggleLikeRequest(recipe_id=recipe_id, user_id=user_id)
            )
            await self._invalidate(like_paths(recipe_id))
            return response

        return await self._guard("toggle_like", "Failed to toggle like", run)

    async def like_status(
        self, recipe_id: str, auth_token: str | None = None
    ) -> Success[GetLikeStatusResponse] | Failure:
        """Read the like count and, for signed-in callers, their like state."""

        async def run() -> GetLikeStatusResponse:
            await self._require_recipe(recipe_id)
            user_id = self._current_user(auth_token)
            return await self.get_like_status_use_case.execute(
                GetLikeStatusRequest(recipe_id=recipe_id, user_id=user_id)
            )

        return await self._guard("like_status", "Failed to load likes", run)

    async def create_comment(
        self,
        recipe_id: str,
        content: str | None,
        auth_token: str | None,
        parent_id: str | None = None,
    ) -> Success[CreateCommentResponse] | Failure:
        """Comment on a recipe, or reply to a comment when parent_id is set."""

        async def run() -> CreateCommentResponse:
            user_id = self._require_user(
                auth_token, "You must be logged in to comment"
            )
            _parse_id(recipe_id, "recipe")
            if parent_id:
                _parse_id(parent_id, "parent comment")
            text = CommentContent.parse(content)
            await self._require_recipe(recipe_id)
            self._admit(AdmissionAction.COMMENT, user_id)

            response = await self.create_comment_use_case.execute(
                CreateCommentRequest(
                    recipe_id=recipe_id,
                    author_id=user_id,
                    content=text.root,
                    parent_id=parent_id,
                )
            )
            await self._invalidate(comment_paths(recipe_id))
            return response

        return await self._guard("create_comment", "Failed to create comment", run)

    async def update_comment(
        self, comment_id: str, content: str | None, auth_token: str | None
    ) -> Success[UpdateCommentResponse] | Failure:
        """Replace the content of one of the caller's comments."""

        async def run() -> UpdateCommentResponse:
            user_id = self._require_user(
                auth_token, "You must be logged in to edit comments"
            )
            _parse_id(comment_id, "comment")
            text = CommentContent.parse(content)
            self._admit(AdmissionAction.COMMENT, user_id)

            response = await self.update_comment_use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment_id, author_id=user_id, content=text.root
                )
            )
            await self._invalidate(comment_paths(response.comment.recipe_id))
            return response

        return await self._guard(
            "update_comment",
            "Failed to update comment",
            run,
            forbidden_message="Comment not found or you do not have permission to edit it",
        )

    async def delete_comment(
        self, comment_id: str, auth_token: str | None
    ) -> Success[DeleteCommentResponse] | Failure:
        """Delete one of the caller's comments."""

        async def run() -> DeleteCommentResponse:
            user_id = self._require_user(
                auth_token, "You must be logged in to delete comments"
            )
            _parse_id(comment_id, "comment")
            self._admit(AdmissionAction.COMMENT, user_id)

            response = await self.delete_comment_use_case.execute(
                DeleteCommentRequest(comment_id=comment_id, author_id=user_id)
            )
            await self._invalidate(comment_paths(response.recipe_id))
            return response

        return await self._guard(
            "delete_comment",
            "Failed to delete comment",
            run,
            forbidden_message="Comment not found or you do not have permission to delete it",
        )

    async def list_comments(
        self, recipe_id: str
    ) -> Success[GetCommentsResponse] | Failure:
        """Get a recipe's comments as reply trees. No authentication needed."""

        async def run() -> GetCommentsResponse:
            await self._require_recipe(recipe_id)
            return await self.get_comments_use_case.execute(
                GetCommentsRequest(recipe_id=recipe_id)
            )

        return await self._guard("list_comments", "Failed to load comments", run)

    def _current_user(self, auth_token: str | None) -> str | None:
        """User ID from a verified token, or None when there is no valid one.

        A signed token whose subject is not a UUID is treated as no token.
        """
        user_id = self.jwt_service.get_user_id_from_token(auth_token)
        if not user_id:
            return None
        try:
            UUID(user_id)
        except ValueError:
            logfire.warn("Token subject is not a user ID", user_id=user_id)
            return None
        return user_id

    def _require_user(self, auth_token: str | None, message: str) -> str:
        user_id = self._current_user(auth_token)
        if not user_id:
            raise AuthRequiredError(message)
        return user_id

    async def _require_recipe(self, recipe_id: str) -> None:
        """Validate a recipe ID and check the recipe exists.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If no recipe has this ID
        """
        await self.recipe_service.get_recipe_by_id(
            RecipeId(_parse_id(recipe_id, "recipe"))
        )

    def _admit(self, action: AdmissionAction, user_id: str) -> None:
        decision = self.admission_control.check(action, user_id)
        if not decision.allowed:
            raise RateLimitedError(action.value, decision.retry_after)

    async def _invalidate(self, paths: Sequence[str]) -> None:
        try:
            await self.cache_invalidator.invalidate(paths)
        except CacheInvalidationError as e:
            logfire.warn("Cache invalidation failed", paths=list(paths), error=str(e))

    async def _guard(
        self,
        operation: str,
        failure_message: str,
        run: Callable[[], Awaitable[T]],
        forbidden_message: str | None = None,
    ) -> Success[T] | Failure:
        """Run an operation and convert raised errors into a Failure.

        Args:
            operation: Operation name for the span and logs
            failure_message: Message for store and unexpected failures
            run: The operation
            forbidden_message: Message for ownership-scoped misses

        Returns:
            Success wrapping the operation's value, or a Failure
        """
        with logfire.span(f"social_facade.{operation}"):
            try:
                return Success(value=await run())
            except AuthRequiredError as e:
                return Failure(error_kind=ErrorKind.AUTH_REQUIRED, message=str(e))
            except ValidationError as e:
                return Failure(error_kind=ErrorKind.VALIDATION, message=str(e))
            except RateLimitedError as e:
                return Failure(
                    error_kind=ErrorKind.RATE_LIMITED,
                    message=RATE_LIMITED_MESSAGE,
                    retry_after=e.retry_after,
                )
            except NotFoundOrForbiddenError as e:
                return Failure(
                    error_kind=ErrorKind.NOT_FOUND_OR_FORBIDDEN,
                    message=forbidden_message or str(e),
                )
            except NotFoundError as e:
                return Failure(error_kind=ErrorKind.NOT_FOUND, message=str(e))
            except SQLAlchemyError as e:
                logfire.error(
                    "Store unavailable", operation=operation, error=str(e)
                )
                return Failure(
                    error_kind=ErrorKind.STORE_UNAVAILABLE, message=failure_message
                )
            except Exception as e:
                logfire.error(
                    "Unexpected error in social operation",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return Failure(error_kind=ErrorKind.UNEXPECTED, message=failure_message)


def _parse_id(value: str, label: str) -> UUID:
    try:
        return UUID(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {label} ID") from e
