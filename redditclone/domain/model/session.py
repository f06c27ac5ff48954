"""Login session entity."""

from datetime import datetime

from redditclone.domain.model.common import DomainModel
from redditclone.domain.value import SessionId, UserId


class Session(DomainModel):
    """Server-side proof that a user has a live login.

    A user may hold many sessions; any unexpired one authorizes them.
    """

    id: SessionId
    user_id: UserId
    created_at: datetime
    expires_at: datetime

    def is_active(self, now: datetime) -> bool:
        """Return True while the session has not expired."""
        return self.expires_at > now
