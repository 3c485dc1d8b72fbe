"""Application layer DI providers."""

from dishka import Scope, provide

from vibeforum.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from vibeforum.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from vibeforum.domain.service import CommentService, PostService
from vibeforum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)
