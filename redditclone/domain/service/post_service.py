"""Post domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from redditclone.domain.error import ValidationError
from redditclone.domain.model import UPVOTE, Post, Vote
from redditclone.domain.repository import PostRepository
from redditclone.domain.value import Author, Category, PostId, PostType

from .base import Service


def _reason(error: PydanticValidationError) -> str:
    """First validation message without pydantic's prefix."""
    message = error.errors()[0]["msg"]
    return message.removeprefix("Value error, ")


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author: Author,
        type: PostType,
        title: str,
        category: Category,
        text: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Post:
        """Create a post owned by the author.

        New posts start with the author's own upvote: score 1, no views,
        100 percent upvoted and an empty comment list.

        Args:
            author: Identity of the requesting user
            type: Text or link post
            title: Post title
            category: Post category
            text: Body of a text post
            url: Target of a link post

        Returns:
            The stored post

        Raises:
            ValidationError: If content does not match the post type
        """
        with logfire.span("post_service.create_post", author=author.username):
            try:
                post = Post(
                    type=type,
                    title=title,
                    category=category,
                    text=text,
                    url=url,
                    author=author,
                    score=1,
                    views=0,
                    upvote_percentage=100,
                    votes=[Vote(user=author.id, vote=UPVOTE)],
                    comments=[],
                    created=datetime.now(timezone.utc),
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid post content", error=str(e))
                raise ValidationError(_reason(e)) from e

            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_id=saved.id, author=author.username)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Fetch a post and count the view.

        Args:
            post_id: Post ID

        Returns:
            The post after its view counter moved
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            return await self.post_repository.get_by_id(post_id)

    async def list_posts(self) -> list[Post]:
        """List all posts, highest score first."""
        return await self.post_repository.find_all()

    async def list_by_user(self, username: str) -> list[Post]:
        """List posts written by a user."""
        return await self.post_repository.find_by_author(username)

    async def list_by_category(self, category: Category) -> list[Post]:
        """List posts in a category."""
        return await self.post_repository.find_by_category(category)

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post with its comments and votes.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id)
