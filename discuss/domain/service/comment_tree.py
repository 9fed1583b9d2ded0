"""Threaded comment tree.

Comments of a post are stored flat, each pointing at its parent through
``parent_id``. The functions here rebuild the thread structure from such a
flat list. They are pure: no I/O and no mutation of the input, so the same
snapshot always yields the same tree.

Sibling order is always the order of the input sequence. Comments are
fetched newest first, so by default newer replies come first in each group.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence, TypeVar

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId

R = TypeVar("R")


@dataclass
class CommentNode:
    """A comment with its direct replies."""

    comment: Comment
    depth: int
    children: list["CommentNode"] = field(default_factory=list)

    def size(self) -> int:
        """Number of comments in this subtree, including this one."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count


def roots_of(comments: Iterable[Comment]) -> list[Comment]:
    """Top-level comments, in input order."""
    return [comment for comment in comments if comment.is_root]


def children_of(comments: Iterable[Comment], parent_id: CommentId) -> list[Comment]:
    """Direct replies to ``parent_id``, in input order.

    An id that isn't in ``comments`` simply has no children.
    """
    return [comment for comment in comments if comment.parent_id == parent_id]


def find_comment(
    comments: Iterable[Comment], comment_id: CommentId
) -> Optional[Comment]:
    """Look up a comment by id, or None when it isn't in the set."""
    return next((c for c in comments if c.id == comment_id), None)


def group_by_parent(
    comments: Iterable[Comment],
) -> dict[Optional[CommentId], list[Comment]]:
    """Map each parent id (None for roots) to its replies, in input order."""
    groups: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        groups[comment.parent_id].append(comment)
    return groups


def walk_comment_tree(
    comments: Sequence[Comment], comment_id: Optional[CommentId] = None
) -> Iterator[tuple[int, Comment]]:
    """Yield ``(depth, comment)`` pairs in depth-first pre-order.

    With no ``comment_id`` the walk covers every thread, starting from the
    roots at depth 0. With a ``comment_id`` it covers that comment's subtree
    only, starting at depth 0; an unknown id yields nothing.

    Comments whose parent is missing from ``comments`` are unreachable and
    skipped. A comment is never entered twice, so parent cycles in
    malformed data end the descent instead of recursing forever.
    """
    groups = group_by_parent(comments)

    if comment_id is None:
        start = groups.get(None, [])
    else:
        target = find_comment(comments, comment_id)
        start = [target] if target is not None else []

    visited: set[CommentId] = set()
    # Explicit stack so deep threads don't hit the recursion limit
    stack: list[tuple[int, Comment]] = [(0, c) for c in reversed(start)]
    while stack:
        depth, comment = stack.pop()
        if comment.id in visited:
            continue
        visited.add(comment.id)
        yield depth, comment
        for child in reversed(groups.get(comment.id, [])):
            stack.append((depth + 1, child))


def build_comment_tree(
    comments: Sequence[Comment], comment_id: Optional[CommentId] = None
) -> list[CommentNode]:
    """Materialize the threads of a post as nested nodes.

    Children are grouped by ``parent_id`` once, so building the whole tree
    is linear in the number of comments.

    Args:
        comments: Flat comments of a single post
        comment_id: Build only this comment's subtree (empty if unknown)

    Returns:
        Root nodes (or the single requested node), children populated
        recursively in input order
    """
    roots: list[CommentNode] = []
    path: list[CommentNode] = []
    for depth, comment in walk_comment_tree(comments, comment_id):
        node = CommentNode(comment=comment, depth=depth)
        del path[depth:]
        if depth == 0:
            roots.append(node)
        else:
            path[-1].children.append(node)
        path.append(node)
    return roots


def render_comment_tree(
    comments: Sequence[Comment],
    render: Callable[[Comment, int], R],
    comment_id: Optional[CommentId] = None,
) -> list[R]:
    """Apply ``render(comment, depth)`` to every comment in thread order."""
    return [
        render(comment, depth)
        for depth, comment in walk_comment_tree(comments, comment_id)
    ]
