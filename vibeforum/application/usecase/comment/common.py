"""Comment representations shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from vibeforum.domain.model import Comment, CommentNode
from vibeforum.domain.service import is_guest_address


class CommentItem(BaseModel):
    """A single comment as returned to clients."""

    comment_id: str
    post_id: str
    parent_id: str | None
    author_name: str | None
    is_guest: bool
    content: str
    votes_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert a domain comment to its response shape."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author_name,
            is_guest=is_guest_address(comment.author_email or ""),
            content=comment.content,
            votes_count=comment.votes_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentNodeResponse(CommentItem):
    """Comment with its nested replies.

    Recursive structure mirroring the domain comment tree.
    """

    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain comment node, recursing into its replies."""
        return cls(
            **CommentItem.from_domain(node).model_dump(),
            replies=[cls.from_domain(reply) for reply in node.replies],
        )
