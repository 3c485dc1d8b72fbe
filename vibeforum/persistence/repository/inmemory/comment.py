"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from vibeforum.domain.model.comment import Comment
from vibeforum.domain.repository.comment import CommentRepository
from vibeforum.domain.value import CommentId, CommentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.PUBLISHED,
    ) -> list[Comment]:
        """Find the comments of a post, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.status == status
        ]

        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)

        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Create updated comment (since comments are immutable)
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated
