"""Domain layer DI providers."""

from dishka import Scope, provide

from redditclone.config import AuthSettings
from redditclone.domain.repository import (
    PostRepository,
    SessionRepository,
    UserRepository,
)
from redditclone.domain.service import (
    CommentService,
    JWTService,
    PostService,
    SessionService,
    UserService,
    VoteService,
)
from redditclone.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_session_service(
        self, session_repository: SessionRepository
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(session_repository=session_repository)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, session_service: SessionService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, session_service=session_service
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(self, post_repository: PostRepository) -> CommentService:
        """Provide comment domain service."""
        return CommentService(post_repository=post_repository)

    @provide
    def get_vote_service(self, post_repository: PostRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(post_repository=post_repository)
