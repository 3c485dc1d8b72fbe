"""Update post use case."""

from pydantic import BaseModel

from vibeforum.domain.error import ContentDeletedException, NotFoundError
from vibeforum.domain.service import PostService
from vibeforum.domain.value import PostId, PostStatus

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    author_email: str  # Must match the address the post was created with
    title: str
    content: str
    excerpt: str | None = None


class UpdatePostResponse(PostItem):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for editing a post's title, content and excerpt."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with the author's address and new content

        Returns:
            Updated post

        Raises:
            ValueError: If title, content or email is blank
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the address doesn't own the post
            ContentDeletedException: If the post was deleted
        """
        if (
            not request.title.strip()
            or not request.content.strip()
            or not request.author_email.strip()
        ):
            raise ValueError("Title, content, and email are required")

        post_id = PostId(request.post_id)

        # 1. Retrieve existing post
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        # 2. Check ownership
        self.post_service.authorize_edit(post, request.author_email)

        # 3. Check not deleted
        if post.status == PostStatus.DELETED:
            raise ContentDeletedException("post", request.post_id)

        # 4. Update via service
        updated = await self.post_service.update_content(
            post_id,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
        )
        if updated is None:
            raise NotFoundError("Post", request.post_id)

        return UpdatePostResponse(**PostItem.from_domain(updated).model_dump())
