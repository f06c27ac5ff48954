"""Strongly typed identifiers for domain entities.

Users and sessions carry 24-character alphanumeric ids. Posts and
comments carry the 24-hex-character form of a document ObjectId.
"""

from typing import NewType

UserId = NewType("UserId", str)
SessionId = NewType("SessionId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)

ID_LENGTH = 24
