"""Update comment use case."""

from pydantic import BaseModel

from vibeforum.domain.error import ContentDeletedException, NotFoundError
from vibeforum.domain.service import CommentService
from vibeforum.domain.value import CommentId, CommentStatus, PostId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    post_id: str  # For validation
    author_email: str  # Must match the address the comment was created with
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""

    pass


class UpdateCommentUseCase:
    """Use case for updating a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with IDs, the author's address and new content

        Returns:
            Updated comment details

        Raises:
            ValueError: If content or email is blank, or the comment is on another post
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the address doesn't own the comment
            ContentDeletedException: If the comment was deleted
        """
        if not request.content.strip() or not request.author_email.strip():
            raise ValueError("Content and email are required")

        comment_id = CommentId(request.comment_id)
        post_id = PostId(request.post_id)

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        # 2. Validate comment belongs to specified post
        if comment.post_id != post_id:
            raise ValueError(
                f"Comment {request.comment_id} does not belong to post {request.post_id}"
            )

        # 3. Check ownership
        self.comment_service.authorize_edit(comment, request.author_email)

        # 4. Check not deleted
        if comment.status == CommentStatus.DELETED:
            raise ContentDeletedException("comment", request.comment_id)

        # 5. Update via service
        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        if updated is None:
            raise NotFoundError("Comment", request.comment_id)

        return UpdateCommentResponse(**CommentItem.from_domain(updated).model_dump())
