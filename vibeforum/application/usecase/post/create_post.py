"""Create post use case."""

from pydantic import BaseModel

from vibeforum.domain.service import PostService, resolve_author

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    excerpt: str | None = None
    category_id: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    fingerprint: str | None = None  # Caller fingerprint for the guest fallback


class CreatePostResponse(PostItem):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for publishing a new post as a registered author or a guest."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate title and content are not blank
        2. Resolve the author (guest identity when name or email is missing)
        3. Create the post via post service

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValueError: If title or content is blank
        """
        if not request.title.strip():
            raise ValueError("Title is required")
        if not request.content.strip():
            raise ValueError("Content is required")

        author = resolve_author(
            request.author_name, request.author_email, request.fingerprint
        )

        post = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            author=author,
            excerpt=request.excerpt,
            category_id=request.category_id,
        )

        return CreatePostResponse(**PostItem.from_domain(post).model_dump())
