"""Domain services."""

from .base import Service
from .comment_service import CommentService, CreatedComment, DeletedComment
from .count_reconciler import CountReconciler, Reconciliation
from .jwt_service import JWTService
from .like_service import LikeService, LikeState
from .recipe_service import RecipeService
from .thread_assembler import ReplyTreeNode, assemble_thread, count_nodes

__all__ = [
    "CommentService",
    "CountReconciler",
    "CreatedComment",
    "DeletedComment",
    "JWTService",
    "LikeService",
    "LikeState",
    "Reconciliation",
    "RecipeService",
    "ReplyTreeNode",
    "Service",
    "assemble_thread",
    "count_nodes",
]
