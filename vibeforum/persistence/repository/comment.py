"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vibeforum.domain.model import Comment
from vibeforum.domain.repository import CommentRepository
from vibeforum.domain.value import CommentId, CommentStatus, PostId
from vibeforum.persistence.mappers import comment_to_dict, row_to_comment
from vibeforum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus = CommentStatus.PUBLISHED,
    ) -> List[Comment]:
        """Find the comments of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.status == status.value)
            # id breaks ties between comments created in the same instant
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                content=content,
                updated_at=datetime.now(),
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())
