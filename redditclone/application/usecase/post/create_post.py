"""Create post use case."""

from typing import Optional

from pydantic import BaseModel

from redditclone.domain.service import PostService
from redditclone.domain.value import Author, Category, PostType

from ..base import BaseUseCase
from ..response import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    type: PostType
    title: str
    category: Category
    text: Optional[str] = None
    url: Optional[str] = None
    author: Author  # Identity of the requesting user


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Create the post on behalf of the author.

        Args:
            request: Create post request

        Returns:
            The stored post

        Raises:
            ValidationError: If content does not match the post type
        """
        post = await self.post_service.create_post(
            author=request.author,
            type=request.type,
            title=request.title,
            category=request.category,
            text=request.text,
            url=request.url,
        )
        return PostResponse.from_domain(post)
