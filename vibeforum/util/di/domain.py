"""Domain layer DI providers."""

from dishka import Scope, provide

from vibeforum.config import ForumSettings
from vibeforum.domain.repository import CommentRepository, PostRepository
from vibeforum.domain.service import CommentService, PostService
from vibeforum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, forum_settings: ForumSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, forum_settings=forum_settings
        )
