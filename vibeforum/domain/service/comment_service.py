"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from vibeforum.domain.error import NotAuthorizedError
from vibeforum.domain.model.comment import Comment, CommentNode
from vibeforum.domain.repository import CommentRepository
from vibeforum.domain.service.authorization import can_edit
from vibeforum.domain.service.comment_tree import build_comment_tree
from vibeforum.domain.value import AuthorIdentity, CommentId, CommentStatus, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    span_prefix = "comment_service"

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author: AuthorIdentity,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author: Resolved author identity (registered or guest)
            content: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValueError: If parent comment invalid
        """
        with self.span(
            "create_comment",
            post_id=str(post_id),
            author_name=author.name,
            is_guest=author.is_guest,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise ValueError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValueError("Parent comment does not belong to this post")

            now = datetime.now()
            comment = Comment(
                id=CommentId(str(uuid4())),
                post_id=post_id,
                parent_id=parent_id,
                author_name=author.name,
                author_email=author.email,
                content=content.strip(),
                status=CommentStatus.PUBLISHED,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_name=author.name,
            )
            return saved

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get the published comments of a post as nested reply trees.

        Args:
            post_id: Post ID

        Returns:
            Root comments, oldest first, each with nested replies
        """
        with self.span("get_comment_tree", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id, status=CommentStatus.PUBLISHED
            )
            roots = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                count=len(comments),
                root_count=len(roots),
            )
            return roots

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with self.span(
            "get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    def authorize_edit(self, comment: Comment, submitted_email: str) -> None:
        """Check that ``submitted_email`` may edit ``comment``.

        Raises:
            NotAuthorizedError: If the address doesn't own the comment
        """
        if not can_edit(submitted_email, comment.author_email):
            logfire.warn(
                "Comment edit denied",
                comment_id=str(comment.id),
                submitted_email=submitted_email,
            )
            raise NotAuthorizedError("comment", str(comment.id))

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Update the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, None if the comment doesn't exist
        """
        with self.span(
            "update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(
                comment_id, content.strip()
            )

            if updated:
                logfire.info(
                    "Comment content updated",
                    comment_id=str(comment_id),
                    post_id=str(updated.post_id),
                )
            else:
                logfire.warn(
                    "Comment not found for content update",
                    comment_id=str(comment_id),
                )

            return updated
