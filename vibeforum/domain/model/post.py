"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vibeforum.domain.model.common import DomainModel
from vibeforum.domain.value import PostId, PostStatus


class Post(DomainModel):
    """Post aggregate root.

    A discussion thread opened by a registered user or a guest. Authorship is
    recorded as a display name plus a contact address, which is also what
    edit permission is checked against.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    excerpt: Optional[str] = Field(default=None, max_length=300)
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    category_id: Optional[str] = None
    status: PostStatus = PostStatus.PUBLISHED
    is_pinned: bool = False
    votes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    views_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
