"""Get comments use case."""

from pydantic import BaseModel, Field

from vibeforum.domain.service import (
    CommentService,
    PostService,
    count_comment_nodes,
    prune_comment_tree,
)
from vibeforum.domain.value import PostId

from .common import CommentNodeResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str
    max_level: int | None = Field(default=None, ge=0)  # None renders every level


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentNodeResponse]
    total: int  # All published comments, including any pruned by max_level


class GetCommentsUseCase:
    """Use case for getting the comment tree of a post."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID and optional depth limit

        Returns:
            Root comments with nested replies, oldest first

        Raises:
            NotFoundError: If the post doesn't exist or isn't published
        """
        post_id = PostId(request.post_id)
        await self.post_service.get_published_post(post_id)

        roots = await self.comment_service.get_comment_tree(post_id)
        total = count_comment_nodes(roots)

        if request.max_level is not None:
            roots = prune_comment_tree(roots, request.max_level)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentNodeResponse.from_domain(root) for root in roots],
            total=total,
        )
