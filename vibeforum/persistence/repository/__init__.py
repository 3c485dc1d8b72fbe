"""PostgreSQL repository implementations."""

from vibeforum.persistence.repository.comment import PostgresCommentRepository
from vibeforum.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
