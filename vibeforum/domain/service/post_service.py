"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from vibeforum.config import ForumSettings
from vibeforum.domain.error import NotAuthorizedError, NotFoundError
from vibeforum.domain.model.post import Post
from vibeforum.domain.repository import PostRepository
from vibeforum.domain.service.authorization import can_edit
from vibeforum.domain.value import AuthorIdentity, PostId, PostStatus

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    span_prefix = "post_service"

    def __init__(
        self, post_repository: PostRepository, forum_settings: ForumSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            forum_settings: Forum settings (excerpt length)
        """
        self.post_repository = post_repository
        self.forum_settings = forum_settings

    def default_excerpt(self, title: str) -> str:
        """Build the excerpt used when the author doesn't write one."""
        return title.strip()[: self.forum_settings.excerpt_length] + "..."

    async def create_post(
        self,
        title: str,
        content: str,
        author: AuthorIdentity,
        excerpt: str | None = None,
        category_id: str | None = None,
    ) -> Post:
        """Create and publish a post.

        Args:
            title: Post title
            content: Post body
            author: Resolved author identity (registered or guest)
            excerpt: Short summary (defaults to the truncated title)
            category_id: Category the post is filed under

        Returns:
            Created post
        """
        with self.span(
            "create_post",
            title=title,
            author_name=author.name,
            is_guest=author.is_guest,
        ):
            now = datetime.now()
            post = Post(
                id=PostId(str(uuid4())),
                title=title.strip(),
                content=content.strip(),
                excerpt=(excerpt or "").strip() or self.default_excerpt(title),
                author_name=author.name,
                author_email=author.email,
                category_id=category_id,
                status=PostStatus.PUBLISHED,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author_name=author.name,
                is_guest=author.is_guest,
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with self.span("get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_published_post(self, post_id: PostId) -> Post:
        """Get a post that is visible to readers.

        Args:
            post_id: Post ID

        Returns:
            The published post

        Raises:
            NotFoundError: If the post doesn't exist or isn't published
        """
        post = await self.get_post_by_id(post_id)
        if post is None or post.status != PostStatus.PUBLISHED:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_published(
        self, category_id: str | None = None, limit: int = 20, offset: int = 0
    ) -> tuple[list[Post], int]:
        """List published posts with the total count for pagination.

        Args:
            category_id: Optional category filter
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Tuple of (posts on this page, total matching posts)
        """
        with self.span(
            "list_published",
            category_id=category_id,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_published(
                category_id=category_id, limit=limit, offset=offset
            )
            total = await self.post_repository.count_published(category_id=category_id)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    def authorize_edit(self, post: Post, submitted_email: str) -> None:
        """Check that ``submitted_email`` may edit ``post``.

        Raises:
            NotAuthorizedError: If the address doesn't own the post
        """
        if not can_edit(submitted_email, post.author_email):
            logfire.warn(
                "Post edit denied",
                post_id=str(post.id),
                submitted_email=submitted_email,
            )
            raise NotAuthorizedError("post", str(post.id))

    async def update_content(
        self, post_id: PostId, title: str, content: str, excerpt: str | None = None
    ) -> Post | None:
        """Replace the title, content and excerpt of a post.

        Args:
            post_id: Post ID
            title: New title
            content: New content
            excerpt: New excerpt (defaults to the truncated title)

        Returns:
            Updated post, None if the post doesn't exist
        """
        with self.span(
            "update_content",
            post_id=str(post_id),
            content_length=len(content),
        ):
            updated = await self.post_repository.update_content(
                post_id,
                title=title.strip(),
                content=content.strip(),
                excerpt=(excerpt or "").strip() or self.default_excerpt(title),
            )

            if updated:
                logfire.info("Post content updated", post_id=str(post_id))
            else:
                logfire.warn("Post not found for update", post_id=str(post_id))

            return updated

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment a post's view counter.

        Args:
            post_id: Post ID
        """
        with self.span("increment_views", post_id=str(post_id)):
            await self.post_repository.increment_views(post_id)

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment counter.

        Args:
            post_id: Post ID
        """
        with self.span(
            "increment_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.increment_comment_count(post_id)
            logfire.info("Comment count incremented", post_id=str(post_id))
