"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.invalidation import ViewInvalidator
from discuss.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from discuss.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    EditPostUseCase,
    GetPostUseCase,
    ListTopPostsUseCase,
    ListUserPostsUseCase,
    SearchPostsUseCase,
)
from discuss.application.usecase.topic import (
    CreateTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
)
from discuss.config import Settings
from discuss.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PostService,
    SessionService,
    TopicService,
    UserIdentityService,
    UserService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        user_service: UserService,
        user_identity_service: UserIdentityService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            user_service=user_service,
            user_identity_service=user_identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_service: SessionService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(session_service=session_service)

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        topic_service: TopicService,
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            session_service=session_service,
            invalidator=invalidator,
            topic_service=topic_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(self, topic_service: TopicService) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_get_topic_use_case(
        self, topic_service: TopicService, post_service: PostService
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(topic_service=topic_service, post_service=post_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        topic_service: TopicService,
        post_service: PostService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            session_service=session_service,
            invalidator=invalidator,
            topic_service=topic_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_post_use_case(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
    ) -> EditPostUseCase:
        """Provide edit post use case."""
        return EditPostUseCase(
            session_service=session_service,
            invalidator=invalidator,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            session_service=session_service,
            invalidator=invalidator,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_top_posts_use_case(
        self, post_service: PostService, settings: Settings
    ) -> ListTopPostsUseCase:
        """Provide top posts use case."""
        return ListTopPostsUseCase(post_service=post_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, post_service: PostService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self, session_service: SessionService, post_service: PostService
    ) -> ListUserPostsUseCase:
        """Provide list user posts use case."""
        return ListUserPostsUseCase(
            session_service=session_service, post_service=post_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
        comment_service: CommentService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            session_service=session_service,
            invalidator=invalidator,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )
