"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from vibeforum.domain.model import Comment, Post
from vibeforum.domain.value import CommentId, CommentStatus, PostId, PostStatus


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(str(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt"),
        author_name=row.get("author_name"),
        author_email=row.get("author_email"),
        category_id=row.get("category_id"),
        status=PostStatus(row["status"]),
        is_pinned=row["is_pinned"],
        votes_count=row["votes_count"],
        comments_count=row["comments_count"],
        views_count=row["views_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump(mode="python") | {"status": post.status.value}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(str(row["id"])),
        post_id=PostId(str(row["post_id"])),
        parent_id=CommentId(str(row["parent_id"])) if row.get("parent_id") else None,
        author_name=row.get("author_name"),
        author_email=row.get("author_email"),
        content=row["content"],
        votes_count=row["votes_count"],
        status=CommentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump(mode="python") | {"status": comment.status.value}
