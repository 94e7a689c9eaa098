"""
Record ID generation.
"""
import secrets
import string

# URL-safe alphabet (matches [A-Za-z0-9_-])
ID_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_id(length: int = 10) -> str:
    """Generate a short random URL-safe ID.

    Uniqueness is probabilistic: 64**10 possible IDs at the default length.
    """
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
