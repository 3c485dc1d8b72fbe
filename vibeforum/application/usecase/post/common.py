"""Post representation shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from vibeforum.domain.model import Post
from vibeforum.domain.service import is_guest_address


class PostItem(BaseModel):
    """Post as returned to clients.

    The author's address is never exposed; ``is_guest`` tells the view layer
    whether to badge the author as a guest.
    """

    post_id: str
    title: str
    content: str
    excerpt: str | None
    author_name: str | None
    is_guest: bool
    category_id: str | None
    is_pinned: bool
    votes_count: int
    comments_count: int
    views_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        """Convert a domain post to its response shape."""
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            excerpt=post.excerpt,
            author_name=post.author_name,
            is_guest=is_guest_address(post.author_email or ""),
            category_id=post.category_id,
            is_pinned=post.is_pinned,
            votes_count=post.votes_count,
            comments_count=post.comments_count,
            views_count=post.views_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
