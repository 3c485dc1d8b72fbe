"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from vibeforum.domain.model.post import Post
from vibeforum.domain.repository.post import PostRepository
from vibeforum.domain.value import PostId, PostStatus


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _published(self, category_id: Optional[str]) -> list[Post]:
        posts = [p for p in self._posts.values() if p.status == PostStatus.PUBLISHED]
        if category_id is not None:
            posts = [p for p in posts if p.category_id == category_id]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_published(
        self,
        category_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find published posts, pinned first, then newest first."""
        posts = self._published(category_id)
        posts.sort(key=lambda p: (p.is_pinned, p.created_at), reverse=True)

        # Paginate
        return posts[offset : offset + limit]

    async def count_published(self, category_id: Optional[str] = None) -> int:
        """Count published posts."""
        return len(self._published(category_id))

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: str, excerpt: str
    ) -> Optional[Post]:
        """Replace the editable fields of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(
            update={
                "title": title,
                "content": content,
                "excerpt": excerpt,
                "updated_at": datetime.now(),
            }
        )
        self._posts[post_id] = updated
        return updated

    async def increment_views(self, post_id: PostId) -> None:
        """Increment the view counter by 1."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"views_count": post.views_count + 1}
            )

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment the comment counter by 1."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comments_count": post.comments_count + 1}
            )
