"""Post routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from vibeforum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from vibeforum.config import ForumSettings
from vibeforum.domain.error import (
    ContentDeletedException,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)
from vibeforum.interface.api.fingerprint import caller_fingerprint

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Name and email are optional; without both the post is attributed to a
    guest identity derived from the caller.
    """

    title: str = Field(max_length=300)
    content: str = Field(max_length=10000)
    excerpt: str | None = Field(default=None, max_length=300)
    category_id: str | None = None
    author_name: str | None = Field(default=None, max_length=100)
    author_email: str | None = Field(default=None, max_length=255)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    http_request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Args:
        request: Post creation data
        http_request: Incoming request, used for the guest fingerprint
        create_post_use_case: Create post use case from DI

    Returns:
        Created post details

    Raises:
        HTTPException: If validation fails
    """
    try:
        use_case_request = CreatePostRequest(
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            category_id=request.category_id,
            author_name=request.author_name,
            author_email=request.author_email,
            fingerprint=caller_fingerprint(http_request.headers),
        )

        return await create_post_use_case.execute(use_case_request)

    except (DomainError, ValueError) as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post."""

    title: str = Field(max_length=300)
    content: str = Field(max_length=10000)
    excerpt: str | None = Field(default=None, max_length=300)
    author_email: str = Field(max_length=255)


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post's title, content and excerpt.

    Only the address the post was created with may edit it.

    Args:
        post_id: Post UUID
        request: Update data and the author's address
        update_post_use_case: Update post use case from DI

    Returns:
        Updated post details

    Raises:
        HTTPException: If not authorized, not found, or validation fails
    """
    try:
        use_case_request = UpdatePostRequest(
            post_id=str(post_id),
            author_email=request.author_email,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
        )

        return await update_post_use_case.execute(use_case_request)

    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post update attempt", post_id=str(post_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except (NotFoundError, ContentDeletedException) as e:
        logfire.warn("Attempt to edit missing post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Post update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a published post with its comment thread.

    Each successful read counts as a view.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details, nested comments and the comment total

    Raises:
        HTTPException: If post not found
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))

    except NotFoundError:
        logfire.warn("Post not found", post_id=str(post_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching post", post_id=str(post_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch post",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    forum_settings: FromDishka[ForumSettings],
    category_id: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> ListPostsResponse:
    """List published posts, pinned first and then newest.

    Args:
        list_posts_use_case: List posts use case from DI
        forum_settings: Forum settings from DI
        category_id: Filter by category (optional)
        limit: Maximum number of posts to return (defaults to the page size)
        offset: Number of posts to skip

    Returns:
        Page of posts and the total number of published posts
    """
    if limit is None:
        limit = forum_settings.default_page_size

    # Validate pagination
    if limit < 1 or limit > forum_settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Limit must be between 1 and {forum_settings.max_page_size}",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Offset must be non-negative",
        )

    request = ListPostsRequest(
        category_id=category_id,
        limit=limit,
        offset=offset,
    )

    try:
        return await list_posts_use_case.execute(request)

    except ValueError as e:
        logfire.warn("List posts validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )
