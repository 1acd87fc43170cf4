"""UUID generation and validation utilities.

This module centralizes all UUID handling. This is the ONLY module that
should import from uuid. All other code should use uid.generate_uuid()
and uid.is_valid_uuid().
"""

from uuid import UUID, uuid4


def generate_uuid() -> str:
    """Generate a random UUID v4 as a string."""
    return str(uuid4())


def is_valid_uuid(value: str) -> bool:
    """Return True if value is a well-formed UUID string (hyphenated, 36 chars)."""
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True
