"""Comment use cases."""

from .common import CommentItem, CommentNodeResponse
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeResponse",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
