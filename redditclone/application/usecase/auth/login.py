"""Login use case."""

from pydantic import BaseModel

from redditclone.domain.service import JWTService, UserService

from ..base import BaseUseCase
from .register import TokenResponse


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Check credentials, open a session and issue a token.

        Args:
            request: Login request

        Returns:
            Token response

        Raises:
            NotFoundError: If the user does not exist
            InvalidCredentialsError: If the password is wrong
        """
        user = await self.user_service.login(request.username, request.password)
        return TokenResponse(token=self.jwt_service.create_token(user))
