"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from vibeforum.domain.model.comment import Comment
from vibeforum.domain.value import CommentId, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.PUBLISHED,
    ) -> List[Comment]:
        """Find the comments of a post, oldest first.

        Comments are returned flat, ordered by ``created_at`` ascending, which
        is the order the comment tree builder expects.

        Args:
            post_id: The post ID
            status: Only return comments with this status

        Returns:
            List of comments in chronological order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment and bump ``updated_at``.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, None if it doesn't exist
        """
        pass
