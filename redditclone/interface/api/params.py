"""Path parameter checks shared by post routes."""

from redditclone.domain.value import ID_LENGTH, Category
from redditclone.interface.error import HTTPError


def require_post_id(post_id: str) -> str:
    """Reject post ids that are not exactly 24 characters."""
    if len(post_id) != ID_LENGTH:
        raise HTTPError(400, "invalid post id")
    return post_id


def require_comment_id(comment_id: str) -> str:
    """Reject comment ids that are not exactly 24 characters."""
    if len(comment_id) != ID_LENGTH:
        raise HTTPError(400, "invalid comment id")
    return comment_id


def require_category(category: str) -> Category:
    """Parse a category from the closed set."""
    try:
        return Category(category)
    except ValueError:
        raise HTTPError(400, "invalid category")
