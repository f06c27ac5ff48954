"""Register use case."""

from pydantic import BaseModel, Field

from redditclone.domain.service import JWTService, UserService

from ..base import BaseUseCase


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Bearer token issued after register or login."""

    token: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing the user in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Register the user and issue a token.

        Args:
            request: Register request

        Returns:
            Token response

        Raises:
            AlreadyExistsError: If the username is taken
            SessionCreationError: If the session cannot be stored
        """
        user = await self.user_service.register(request.username, request.password)
        return TokenResponse(token=self.jwt_service.create_token(user))
