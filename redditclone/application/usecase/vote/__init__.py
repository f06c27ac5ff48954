"""Vote use cases."""

from .vote import VoteRequest, VoteUseCase

__all__ = [
    "VoteRequest",
    "VoteUseCase",
]
