"""Domain services."""

from .authorization import can_edit, same_classification
from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_comment_nodes, prune_comment_tree
from .guest_identity import (
    guest_address_for,
    guest_handle_from_address,
    is_guest_address,
    resolve_author,
    resolve_guest_handle,
    same_guest,
)
from .post_service import PostService

__all__ = [
    "CommentService",
    "PostService",
    "Service",
    "build_comment_tree",
    "can_edit",
    "count_comment_nodes",
    "guest_address_for",
    "guest_handle_from_address",
    "is_guest_address",
    "prune_comment_tree",
    "resolve_author",
    "resolve_guest_handle",
    "same_classification",
    "same_guest",
]
