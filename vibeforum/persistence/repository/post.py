"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vibeforum.domain.model import Post
from vibeforum.domain.repository import PostRepository
from vibeforum.domain.value import PostId, PostStatus
from vibeforum.persistence.mappers import post_to_dict, row_to_post
from vibeforum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _published(self, category_id: Optional[str]):
        """Base filter for published posts, optionally within a category."""
        clauses = [posts_table.c.status == PostStatus.PUBLISHED.value]
        if category_id is not None:
            clauses.append(posts_table.c.category_id == category_id)
        return clauses

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_published(
        self,
        category_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find published posts, pinned first, then newest first."""
        stmt = (
            select(posts_table)
            .where(*self._published(category_id))
            .order_by(desc(posts_table.c.is_pinned), desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_published(self, category_id: Optional[str] = None) -> int:
        """Count published posts."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*self._published(category_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: str, excerpt: str
    ) -> Optional[Post]:
        """Replace the editable fields of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                title=title,
                content=content,
                excerpt=excerpt,
                updated_at=datetime.now(),
            )
            .returning(posts_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(views_count=posts_table.c.views_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the comment counter by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comments_count=posts_table.c.comments_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
