"""Response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from recipebox.domain.model.comment import AuthoredComment
from recipebox.domain.service import ReplyTreeNode

# Deepest reply nesting in responses; deeper replies are flattened
MAX_REPLY_DEPTH = 50


class CommentAuthor(BaseModel):
    """Author display data."""

    username: str
    full_name: str


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    recipe_id: str
    author_id: str
    author: CommentAuthor
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: AuthoredComment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            recipe_id=str(comment.recipe_id),
            author_id=str(comment.author_id),
            author=CommentAuthor(
                username=comment.author.username,
                full_name=comment.author.full_name,
            ),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentNode(CommentItem):
    """Comment item with its replies, oldest first."""

    replies: list["CommentNode"] = []

    @classmethod
    def from_tree(
        cls, root: ReplyTreeNode[AuthoredComment], max_depth: int = MAX_REPLY_DEPTH
    ) -> "CommentNode":
        """Convert a reply tree.

        Replies nested deeper than ``max_depth`` are listed under their
        ancestor at that depth, oldest first. Every reply stays in the
        response while its nesting stays bounded.

        Args:
            root: Root of an assembled reply tree
            max_depth: Deepest nesting level kept in the response

        Returns:
            The converted tree
        """
        top = cls._leaf(root.comment)
        stack = [(root, top, 0)]
        while stack:
            node, converted, depth = stack.pop()
            if depth >= max_depth:
                converted.replies.extend(
                    cls._leaf(descendant.comment) for descendant in _descendants(node)
                )
                continue

            for reply in node.replies:
                child = cls._leaf(reply.comment)
                converted.replies.append(child)
                stack.append((reply, child, depth + 1))
        return top

    @classmethod
    def _leaf(cls, comment: AuthoredComment) -> "CommentNode":
        return cls(**CommentItem.from_domain(comment).model_dump(), replies=[])


def _descendants(
    node: ReplyTreeNode[AuthoredComment],
) -> list[ReplyTreeNode[AuthoredComment]]:
    found: list[ReplyTreeNode[AuthoredComment]] = []
    stack = list(reversed(node.replies))
    while stack:
        current = stack.pop()
        found.append(current)
        stack.extend(reversed(current.replies))
    return sorted(found, key=lambda n: n.comment.created_at)
