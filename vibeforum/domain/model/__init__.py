"""Domain model entities for the forum."""

from vibeforum.domain.model.comment import Comment, CommentNode
from vibeforum.domain.model.post import Post

__all__ = [
    "Post",
    "Comment",
    "CommentNode",
]
