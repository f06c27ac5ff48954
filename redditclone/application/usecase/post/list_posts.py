"""List posts use case."""

from typing import Optional

from pydantic import BaseModel

from redditclone.domain.service import PostService
from redditclone.domain.value import Category

from ..base import BaseUseCase
from ..response import PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    At most one filter applies; without one every post is listed by score.
    """

    category: Optional[Category] = None
    author: Optional[str] = None  # Username


class ListPostsUseCase(BaseUseCase):
    """Use case for post listings."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> list[PostResponse]:
        """List posts, filtered by author or category when given.

        Args:
            request: List posts request

        Returns:
            Matching posts
        """
        if request.author is not None:
            posts = await self.post_service.list_by_user(request.author)
        elif request.category is not None:
            posts = await self.post_service.list_by_category(request.category)
        else:
            posts = await self.post_service.list_posts()

        return [PostResponse.from_domain(p) for p in posts]
