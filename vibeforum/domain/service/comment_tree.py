"""Comment tree assembly.

Comments are fetched flat, ordered by ``created_at`` ascending, and nested
here for rendering. The builder never re-sorts: sibling order is input order.
"""

from collections.abc import Sequence

from vibeforum.domain.model.comment import Comment, CommentNode
from vibeforum.domain.value import CommentId
from vibeforum.util.logging import get_logger

logger = get_logger(__name__)


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Nest a flat, chronologically ordered list of comments into reply trees.

    A comment whose ``parent_id`` is missing from ``comments`` (deleted parent,
    parent hidden by moderation, or simply not part of this fetch) is promoted
    to a root rather than dropped, so every input comment appears exactly once
    in the result.

    IDs must be unique. With duplicates the index keeps the last node seen,
    and replies to that ID attach to it.

    Args:
        comments: Comments of a single post, oldest first

    Returns:
        Root nodes in input order, each with its nested ``replies``
    """
    nodes: list[CommentNode] = []
    index: dict[CommentId, CommentNode] = {}

    # All IDs must be indexed before any parent link is resolved
    for comment in comments:
        assert comment.id, "comment without an id"
        node = CommentNode.from_comment(comment)
        nodes.append(node)
        index[comment.id] = node

    roots: list[CommentNode] = []
    promoted = 0
    for node in nodes:
        parent = index.get(node.parent_id) if node.parent_id else None
        if parent is not None and parent is not node:
            parent.replies.append(node)
        else:
            if node.parent_id:
                promoted += 1
            roots.append(node)

    if promoted:
        logger.debug("Promoted %d comments with unknown parents to top level", promoted)

    return roots


def prune_comment_tree(
    roots: Sequence[CommentNode], max_level: int
) -> list[CommentNode]:
    """Copy a comment tree, cutting replies nested deeper than ``max_level``.

    Roots are level 0. This is a rendering helper; the input tree is left
    untouched.

    Args:
        roots: Root nodes from ``build_comment_tree``
        max_level: Deepest level to keep (negative keeps nothing)

    Returns:
        Pruned copies of the root nodes
    """

    def prune(node: CommentNode, level: int) -> CommentNode:
        replies = (
            [prune(reply, level + 1) for reply in node.replies]
            if level < max_level
            else []
        )
        return node.model_copy(update={"replies": replies})

    if max_level < 0:
        return []
    return [prune(root, 0) for root in roots]


def count_comment_nodes(roots: Sequence[CommentNode]) -> int:
    """Count every node in a comment tree."""
    return sum(1 + count_comment_nodes(node.replies) for node in roots)
