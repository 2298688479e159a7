"""Reply tree assembly.

Turns the flat, oldest-first comment list of a recipe into a forest of
reply trees in two linear passes over an id -> node map.
"""

from dataclasses import dataclass, field
from typing import Generic, Hashable, Optional, Protocol, Sequence, TypeVar


class Threadable(Protocol):
    """Anything with an id and an optional parent id."""

    @property
    def id(self) -> Hashable: ...

    @property
    def parent_id(self) -> Optional[Hashable]: ...


T = TypeVar("T", bound=Threadable)


@dataclass
class ReplyTreeNode(Generic[T]):
    """A comment and its replies, oldest first."""

    comment: T
    replies: list["ReplyTreeNode[T]"] = field(default_factory=list)

    def size(self) -> int:
        """Number of comments in this subtree, including this one.

        Walks with an explicit stack; threads may be deeper than the
        interpreter recursion limit.
        """
        total = 0
        stack: list[ReplyTreeNode[T]] = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.replies)
        return total


def assemble_thread(comments: Sequence[T]) -> list[ReplyTreeNode[T]]:
    """Build reply trees from a flat comment list.

    Every node is created before any is linked, so parents and children
    may appear in any order. Sibling order follows input order, which is
    chronological when the input is sorted by created_at.

    A comment whose parent is not in the input (e.g. the parent was deleted)
    is dropped: it is neither a root nor attached anywhere.

    Args:
        comments: Comments of one recipe

    Returns:
        Root nodes in input order
    """
    nodes: dict[Hashable, ReplyTreeNode[T]] = {
        comment.id: ReplyTreeNode(comment=comment) for comment in comments
    }

    roots: list[ReplyTreeNode[T]] = []
    for comment in comments:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.replies.append(node)

    return roots


def count_nodes(roots: Sequence[ReplyTreeNode[T]]) -> int:
    """Number of comments reachable from the given roots."""
    return sum(root.size() for root in roots)
