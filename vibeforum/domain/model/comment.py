"""Comment entity.

Comments are stored flat, each carrying an optional ``parent_id``. The nested
reply structure used for rendering is rebuilt per request from the flat rows
(see ``vibeforum.domain.service.comment_tree``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vibeforum.domain.model.common import DomainModel
from vibeforum.domain.value import CommentId, CommentStatus, PostId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through ``parent_id`` only: ``None`` means the
    comment is attached directly to the post.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    content: str = Field(min_length=1, max_length=10000)
    votes_count: int = Field(default=0, ge=0)
    status: CommentStatus = CommentStatus.PUBLISHED
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class CommentNode(Comment):
    """A comment together with its direct replies, in chronological order."""

    replies: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Create a childless node carrying every field of ``comment``."""
        return cls(**comment.model_dump(exclude={"replies"}), replies=[])
