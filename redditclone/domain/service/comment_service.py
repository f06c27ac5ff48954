"""Comment domain service."""

from datetime import datetime, timezone

import logfire

from redditclone.domain.model import Comment, Post
from redditclone.domain.repository import PostRepository
from redditclone.domain.value import Author, CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comments embedded in posts."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize comment service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def add_comment(self, post_id: PostId, body: str, author: Author) -> Post:
        """Append a comment stamped with the current time.

        Args:
            post_id: Post to comment on
            body: Comment text
            author: Identity of the requesting user

        Returns:
            The updated post
        """
        with logfire.span(
            "comment_service.add_comment", post_id=post_id, author=author.username
        ):
            comment = Comment(
                created=datetime.now(timezone.utc),
                author=author,
                body=body,
            )
            post = await self.post_repository.add_comment(post_id, comment)
            logfire.info("Comment added", post_id=post_id, author_id=author.id)
            return post

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> Post:
        """Remove a comment from a post.

        Args:
            post_id: Post holding the comment
            comment_id: Comment to remove

        Returns:
            The updated post
        """
        with logfire.span(
            "comment_service.remove_comment", post_id=post_id, comment_id=comment_id
        ):
            post = await self.post_repository.remove_comment(post_id, comment_id)
            logfire.info("Comment removed", post_id=post_id, comment_id=comment_id)
            return post
