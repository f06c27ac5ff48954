"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List

from redditclone.domain.model.comment import Comment
from redditclone.domain.model.post import Post
from redditclone.domain.model.vote import Vote
from redditclone.domain.value import Category, CommentId, PostId, UserId

MAX_VOTE_ATTEMPTS = 5


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Each stored post embeds its votes and comments. Malformed post ids
    raise InvalidIdentifierError and unknown ones raise NotFoundError.
    """

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Store a new post and assign its id.

        Args:
            post: The post to store, without an id

        Returns:
            The stored post with its id set

        Raises:
            AlreadyExistsError: If the key is already taken
        """
        pass

    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Post:
        """Fetch a post, counting the fetch as a view.

        The view counter is incremented atomically and the returned post
        reflects the increment.

        Args:
            post_id: The post's identifier

        Returns:
            The post after the view increment
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts sorted by score, highest first.

        Storage failures yield an empty list.

        Returns:
            All posts
        """
        pass

    @abstractmethod
    async def find_by_author(self, username: str) -> List[Post]:
        """Find posts written by a user.

        Args:
            username: The author's username

        Returns:
            Posts by the author
        """
        pass

    @abstractmethod
    async def find_by_category(self, category: Category) -> List[Post]:
        """Find posts in a category.

        Args:
            category: The category

        Returns:
            Posts in the category
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its votes and comments.

        Args:
            post_id: The post to delete
        """
        pass

    @abstractmethod
    async def add_comment(self, post_id: PostId, comment: Comment) -> Post:
        """Assign the comment an id and append it to the post.

        Args:
            post_id: The post to comment on
            comment: The comment, without an id

        Returns:
            The updated post
        """
        pass

    @abstractmethod
    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> Post:
        """Remove a comment from the post.

        Removing a comment that does not exist leaves the post unchanged.

        Args:
            post_id: The post holding the comment
            comment_id: The comment to remove

        Returns:
            The updated post
        """
        pass

    @abstractmethod
    async def add_vote(self, post_id: PostId, vote: Vote) -> Post:
        """Cast or replace the voter's vote.

        Args:
            post_id: The post to vote on
            vote: The vote to apply

        Returns:
            The updated post

        Raises:
            ConcurrentUpdateError: If concurrent writers win every attempt
        """
        pass

    @abstractmethod
    async def cancel_vote(self, post_id: PostId, user_id: UserId) -> Post:
        """Withdraw the user's vote.

        Args:
            post_id: The post voted on
            user_id: The voter

        Returns:
            The updated post

        Raises:
            NotFoundError: If the user has not voted on the post
            ConcurrentUpdateError: If concurrent writers win every attempt
        """
        pass
