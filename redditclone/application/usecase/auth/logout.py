"""Logout use case."""

from pydantic import BaseModel

from redditclone.domain.service import UserService
from redditclone.domain.value import UserId

from ..base import BaseUseCase
from ..response import MessageResponse


class LogoutRequest(BaseModel):
    """Logout request."""

    user_id: str


class LogoutUseCase(BaseUseCase):
    """Use case for ending every session of the user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: LogoutRequest) -> MessageResponse:
        await self.user_service.logout(UserId(request.user_id))
        return MessageResponse(message="success")
