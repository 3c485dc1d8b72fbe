"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from vibeforum.domain.repository.comment import CommentRepository
from vibeforum.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
]
