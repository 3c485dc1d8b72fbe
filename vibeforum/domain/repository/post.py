"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from vibeforum.domain.model.post import Post
from vibeforum.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, whatever its status.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        category_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find published posts, pinned first, then newest first.

        Args:
            category_id: Filter by category (None for all categories)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count_published(self, category_id: Optional[str] = None) -> int:
        """Count published posts.

        Args:
            category_id: Filter by category (None for all categories)

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, content: str, excerpt: str
    ) -> Optional[Post]:
        """Replace the editable fields of a post and bump ``updated_at``.

        Args:
            post_id: The post ID
            title: New title
            content: New content
            excerpt: New excerpt

        Returns:
            The updated post, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the comment counter by 1."""
        pass
