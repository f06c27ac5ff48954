"""Random identifier generation."""

import secrets
import string

ALPHABET = string.digits + string.ascii_letters


def generate_id(length: int = 24) -> str:
    """Generate an identifier from [0-9A-Za-z] using a cryptographic RNG.

    Args:
        length: Number of characters

    Returns:
        Random identifier
    """
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
