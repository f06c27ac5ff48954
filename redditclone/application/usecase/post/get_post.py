"""Get post use case."""

from pydantic import BaseModel

from redditclone.domain.service import PostService
from redditclone.domain.value import PostId

from ..base import BaseUseCase
from ..response import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for viewing a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Fetch the post, counting one view.

        Raises:
            InvalidIdentifierError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return PostResponse.from_domain(post)
