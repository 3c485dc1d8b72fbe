"""Create comment use case."""

from pydantic import BaseModel

from vibeforum.domain.service import CommentService, PostService, resolve_author
from vibeforum.domain.value import CommentId, PostId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str | None = None
    author_email: str | None = None
    fingerprint: str | None = None  # Caller fingerprint for the guest fallback


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Reject blank content
        2. Verify the post is published via post service
        3. Resolve the author (guest identity when name or email is missing)
        4. Create comment via comment service (validates parent if replying)
        5. Update post's comment count via post service

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValueError: If content is blank or the parent comment is invalid
            NotFoundError: If the post doesn't exist or isn't published
        """
        if not request.content.strip():
            raise ValueError("Content is required")

        post_id = PostId(request.post_id)
        await self.post_service.get_published_post(post_id)

        author = resolve_author(
            request.author_name, request.author_email, request.fingerprint
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=author,
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )

        await self.post_service.increment_comment_count(post_id)

        return CreateCommentResponse(**CommentItem.from_domain(comment).model_dump())
