"""Domain value objects for the forum."""

from vibeforum.domain.value.identifiers import CommentId, PostId
from vibeforum.domain.value.types import AuthorIdentity, CommentStatus, PostStatus

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "AuthorIdentity",
    "CommentStatus",
    "PostStatus",
]
