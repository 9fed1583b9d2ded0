"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings
from discuss.domain.repository import (
    CommentRepository,
    PostRepository,
    TopicRepository,
    UserIdentityRepository,
    UserRepository,
)
from discuss.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    OAuthClient,
    PostService,
    SessionService,
    TopicService,
    UserIdentityService,
    UserService,
)
from discuss.domain.value import AuthProvider
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_session_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_user_identity_service(
        self, user_identity_repository: UserIdentityRepository
    ) -> UserIdentityService:
        """Provide user identity domain service."""
        return UserIdentityService(user_identity_repository=user_identity_repository)
