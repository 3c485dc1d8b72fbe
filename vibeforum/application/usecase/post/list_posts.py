"""List posts use case."""

from pydantic import BaseModel, Field

from vibeforum.domain.service import PostService

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    category_id: str | None = None
    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for paging through published posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filter and pagination parameters

        Returns:
            One page of posts, pinned first, then newest first
        """
        posts, total = await self.post_service.list_published(
            category_id=request.category_id,
            limit=request.limit,
            offset=request.offset,
        )

        return ListPostsResponse(
            posts=[PostItem.from_domain(post) for post in posts],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
