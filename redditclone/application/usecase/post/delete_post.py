"""Delete post use case."""

from pydantic import BaseModel

from redditclone.domain.service import PostService
from redditclone.domain.value import PostId

from ..base import BaseUseCase
from ..response import MessageResponse


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its comments and votes."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete the post.

        Raises:
            InvalidIdentifierError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        await self.post_service.delete_post(PostId(request.post_id))
        return MessageResponse(message="success")
