"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from vibeforum.domain.model.comment import Comment
from vibeforum.domain.value import CommentId, PostId

BASE_TIME = datetime(2025, 1, 15, 9, 30)


def make_comment(
    comment_id: str,
    parent_id: str | None = None,
    post_id: str = "post-1",
    minute: int = 0,
    **overrides,
) -> Comment:
    """Helper to build a published comment for tree tests.

    Args:
        comment_id: Comment ID
        parent_id: Parent comment ID (None for top-level)
        post_id: Owning post ID
        minute: Offset from BASE_TIME, used for ``created_at``
        **overrides: Any other Comment field

    Returns:
        Comment instance
    """
    created_at = BASE_TIME + timedelta(minutes=minute)
    fields = {
        "id": CommentId(comment_id),
        "post_id": PostId(post_id),
        "parent_id": CommentId(parent_id) if parent_id else None,
        "author_name": "Ada",
        "author_email": "ada@example.com",
        "content": f"comment {comment_id}",
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)
