"""Remove comment use case."""

from pydantic import BaseModel

from redditclone.domain.service import CommentService
from redditclone.domain.value import CommentId, PostId

from ..base import BaseUseCase
from ..response import PostResponse


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    post_id: str
    comment_id: str


class RemoveCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RemoveCommentRequest) -> PostResponse:
        """Remove the comment and return the updated post.

        An unknown comment id leaves the post unchanged.
        """
        post = await self.comment_service.remove_comment(
            PostId(request.post_id), CommentId(request.comment_id)
        )
        return PostResponse.from_domain(post)
