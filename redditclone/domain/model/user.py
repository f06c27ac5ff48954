"""User aggregate root."""

from pydantic import Field

from redditclone.domain.model.common import DomainModel
from redditclone.domain.value import UserId


class User(DomainModel):
    """Registered user.

    Immutable after creation. The password hash never leaves the
    persistence and user service layers.
    """

    id: UserId
    username: str = Field(min_length=1)
    password_hash: str = Field(repr=False)
