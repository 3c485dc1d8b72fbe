"""Get post use case."""

from pydantic import BaseModel

from vibeforum.application.usecase.comment.common import CommentNodeResponse
from vibeforum.domain.service import CommentService, PostService, count_comment_nodes
from vibeforum.domain.value import PostId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response: the post and its whole comment thread."""

    post: PostItem
    comments: list[CommentNodeResponse]
    total_comments: int


class GetPostUseCase:
    """Use case for reading a post together with its comment tree."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Steps:
        1. Load the post (published only)
        2. Build its comment tree
        3. Count the view

        Args:
            request: Get post request

        Returns:
            Post, nested comments and the total comment count

        Raises:
            NotFoundError: If the post doesn't exist or isn't published
        """
        post_id = PostId(request.post_id)

        post = await self.post_service.get_published_post(post_id)
        roots = await self.comment_service.get_comment_tree(post_id)

        await self.post_service.increment_views(post_id)

        return GetPostResponse(
            post=PostItem.from_domain(post),
            comments=[CommentNodeResponse.from_domain(root) for root in roots],
            total_comments=count_comment_nodes(roots),
        )
