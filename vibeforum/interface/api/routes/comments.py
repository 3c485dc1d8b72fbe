"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from vibeforum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from vibeforum.config import ForumSettings
from vibeforum.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from vibeforum.interface.api.fingerprint import caller_fingerprint

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(max_length=10000)
    parent_id: UUID | None = None  # Parent comment ID for replies
    author_name: str | None = Field(default=None, max_length=100)
    author_email: str | None = Field(default=None, max_length=255)


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Callers without both a name and an email comment as a guest.

    Args:
        post_id: Post UUID
        request: Comment creation data
        http_request: Incoming request, used for the guest fingerprint
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: If the post is missing or validation fails
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=str(post_id),
            content=request.content,
            parent_id=str(request.parent_id) if request.parent_id else None,
            author_name=request.author_name,
            author_email=request.author_email,
            fingerprint=caller_fingerprint(http_request.headers),
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - post not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except ValueError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    forum_settings: FromDishka[ForumSettings],
    max_level: int | None = Query(default=None, ge=0),
) -> GetCommentsResponse:
    """Get the comment tree for a post.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        forum_settings: Forum settings from DI
        max_level: Deepest reply level to render (0 = top-level comments only),
            defaults to the configured maximum

    Returns:
        Root comments with nested replies
    """
    if max_level is None:
        max_level = forum_settings.max_comment_level

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=str(post_id), max_level=max_level)
        )
    except NotFoundError:
        logfire.warn("Post not found", post_id=str(post_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching comments", post_id=str(post_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(max_length=10000)
    author_email: str = Field(max_length=255)


@router.patch("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the address the comment was created with may edit it.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: New content and the author's address
        update_comment_use_case: Update comment use case from DI

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authorized, not found, or validation fails
    """
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=str(comment_id),
            post_id=str(post_id),
            author_email=request.author_email,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", comment_id=str(comment_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except (NotFoundError, ContentDeletedException) as e:
        logfire.warn("Attempt to edit missing comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except ValueError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )
