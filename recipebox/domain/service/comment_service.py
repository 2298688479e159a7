"""Comment domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from recipebox.config import ReplyPolicy, SocialSettings
from recipebox.domain.error import NotFoundOrForbiddenError, ValidationError
from recipebox.domain.model.comment import AuthoredComment, Comment
from recipebox.domain.repository import CommentRepository, ProfileRepository
from recipebox.domain.value import (
    AuthorDisplay,
    AuthoritativeCount,
    CachedCount,
    CommentContent,
    CommentId,
    CounterKind,
    RecipeId,
    UserId,
)

from .base import Service
from .count_reconciler import CountReconciler


@dataclass(frozen=True)
class CreatedComment:
    """A new comment and the recipe's comment count after it."""

    comment: AuthoredComment
    comment_count: AuthoritativeCount | CachedCount


@dataclass(frozen=True)
class DeletedComment:
    """Result of deleting a comment."""

    comment_id: CommentId
    recipe_id: RecipeId
    comment_count: AuthoritativeCount | CachedCount
    removed_reply_ids: list[CommentId] = field(default_factory=list)
    reparented_replies: int = 0


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        count_reconciler: CountReconciler,
        social_settings: SocialSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile repository for author display joins
            count_reconciler: Reconciler for the recipe comment counter
            social_settings: Reply policy and parent validation settings
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository
        self.count_reconciler = count_reconciler
        self.social_settings = social_settings

    async def create_comment(
        self,
        recipe_id: RecipeId,
        author_id: UserId,
        content: CommentContent,
        parent_id: CommentId | None = None,
    ) -> CreatedComment:
        """Create a comment on a recipe or a reply to another comment.

        Args:
            recipe_id: Recipe ID
            author_id: Author user ID
            content: Validated comment content
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment with author display and the reconciled count

        Raises:
            ValidationError: If parent validation is enabled and the parent
                is missing or belongs to another recipe
        """
        with logfire.span(
            "comment_service.create_comment",
            recipe_id=str(recipe_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id and self.social_settings.validate_parent_recipe:
                await self._check_parent(recipe_id, parent_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                recipe_id=recipe_id,
                author_id=author_id,
                content=content.root,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.insert(comment)

            reconciliation = await self.count_reconciler.reconcile(
                recipe_id, CounterKind.COMMENT_COUNT
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                recipe_id=str(recipe_id),
                is_reply=parent_id is not None,
                comment_count=reconciliation.count.root,
            )
            return CreatedComment(
                comment=await self._with_author(saved),
                comment_count=reconciliation.count,
            )

    async def update_comment(
        self,
        comment_id: CommentId,
        author_id: UserId,
        content: CommentContent,
    ) -> AuthoredComment:
        """Replace the content of a comment owned by author_id.

        Args:
            comment_id: Comment ID
            author_id: User performing the edit
            content: Validated new content

        Returns:
            Updated comment with author display

        Raises:
            NotFoundOrForbiddenError: If no comment with this ID is owned by
                author_id
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
            content_length=len(content.root),
        ):
            updated = await self.comment_repository.update_content(
                comment_id, author_id, content.root, datetime.now()
            )
            if updated is None:
                logfire.warn(
                    "Comment update matched no owned comment",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
                raise NotFoundOrForbiddenError("Comment", str(comment_id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                recipe_id=str(updated.recipe_id),
            )
            return await self._with_author(updated)

    async def delete_comment(
        self, comment_id: CommentId, author_id: UserId
    ) -> DeletedComment:
        """Delete a comment owned by author_id.

        Replies are handled according to the configured reply policy, then
        the recipe's comment counter is reconciled.

        Args:
            comment_id: Comment ID
            author_id: User performing the delete

        Returns:
            What was deleted and the reconciled comment count

        Raises:
            NotFoundOrForbiddenError: If no comment with this ID is owned by
                author_id
        """
        policy = self.social_settings.reply_policy
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
            reply_policy=policy.value,
        ):
            comment = await self.comment_repository.find_owned(comment_id, author_id)
            if comment is None:
                logfire.warn(
                    "Comment delete matched no owned comment",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
                raise NotFoundOrForbiddenError("Comment", str(comment_id))

            reparented = 0
            if policy is ReplyPolicy.REPARENT:
                reparented = await self.comment_repository.reparent_children(
                    comment_id, comment.parent_id
                )

            if not await self.comment_repository.delete_owned(comment_id, author_id):
                raise NotFoundOrForbiddenError("Comment", str(comment_id))

            removed: list[CommentId] = []
            if policy is ReplyPolicy.CASCADE:
                removed = await self._delete_descendants(comment)

            reconciliation = await self.count_reconciler.reconcile(
                comment.recipe_id, CounterKind.COMMENT_COUNT
            )
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                recipe_id=str(comment.recipe_id),
                reply_policy=policy.value,
                removed_replies=len(removed),
                reparented_replies=reparented,
                comment_count=reconciliation.count.root,
            )
            return DeletedComment(
                comment_id=comment_id,
                recipe_id=comment.recipe_id,
                comment_count=reconciliation.count,
                removed_reply_ids=removed,
                reparented_replies=reparented,
            )

    async def list_comments(self, recipe_id: RecipeId) -> list[AuthoredComment]:
        """Get all comments for a recipe, oldest first, with author display.

        Args:
            recipe_id: Recipe ID

        Returns:
            Flat list ordered by created_at ascending
        """
        with logfire.span("comment_service.list_comments", recipe_id=str(recipe_id)):
            comments = await self.comment_repository.find_by_recipe(recipe_id)
            if not comments:
                return []

            # Batch query to fetch all authors at once (avoid N+1)
            author_ids = list({comment.author_id for comment in comments})
            profiles = await self.profile_repository.find_by_ids(author_ids)
            displays = {profile.id: profile.display() for profile in profiles}

            logfire.info(
                "Comments retrieved for recipe",
                recipe_id=str(recipe_id),
                count=len(comments),
                authors=len(author_ids),
                missing_profiles=len(author_ids) - len(displays),
            )
            return [
                AuthoredComment.from_comment(comment, displays.get(comment.author_id))
                for comment in comments
            ]

    async def count_comments(self, recipe_id: RecipeId) -> AuthoritativeCount:
        """Count a recipe's comments from the comments table."""
        return await self.count_reconciler.count(recipe_id, CounterKind.COMMENT_COUNT)

    async def _check_parent(self, recipe_id: RecipeId, parent_id: CommentId) -> None:
        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None:
            logfire.warn("Parent comment not found", parent_id=str(parent_id))
            raise ValidationError("Parent comment not found")
        if parent.recipe_id != recipe_id:
            logfire.warn(
                "Parent comment belongs to another recipe",
                parent_id=str(parent_id),
                parent_recipe_id=str(parent.recipe_id),
                target_recipe_id=str(recipe_id),
            )
            raise ValidationError("Parent comment does not belong to this recipe")

    async def _delete_descendants(self, comment: Comment) -> list[CommentId]:
        siblings = await self.comment_repository.find_by_recipe(comment.recipe_id)

        children: dict[CommentId, list[CommentId]] = defaultdict(list)
        for other in siblings:
            if other.parent_id is not None:
                children[other.parent_id].append(other.id)

        descendants: list[CommentId] = []
        pending = list(children.get(comment.id, []))
        while pending:
            current = pending.pop()
            descendants.append(current)
            pending.extend(children.get(current, []))

        if descendants:
            await self.comment_repository.delete_many(descendants)
        return descendants

    async def _with_author(self, comment: Comment) -> AuthoredComment:
        profile = await self.profile_repository.find_by_id(comment.author_id)
        if profile is None:
            logfire.warn("Profile not found for comment author", author_id=str(comment.author_id))
            return AuthoredComment.from_comment(comment, AuthorDisplay())
        return AuthoredComment.from_comment(comment, profile.display())
