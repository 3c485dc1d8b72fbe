"""Post use cases."""

from .common import PostItem
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
