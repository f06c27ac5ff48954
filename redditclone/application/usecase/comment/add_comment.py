"""Add comment use case."""

from pydantic import BaseModel

from redditclone.domain.service import CommentService
from redditclone.domain.value import Author, PostId

from ..base import BaseUseCase
from ..response import PostResponse


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    body: str
    author: Author  # Identity of the requesting user


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> PostResponse:
        """Append the comment and return the updated post.

        Args:
            request: Add comment request

        Returns:
            Post including the new comment

        Raises:
            InvalidIdentifierError: If the post id is malformed
            NotFoundError: If the post does not exist
        """
        post = await self.comment_service.add_comment(
            PostId(request.post_id), request.body, request.author
        )
        return PostResponse.from_domain(post)
