"""Record identifier helpers."""

import uuid


def generate_id() -> str:
    """Generate a globally unique record ID.

    Returns:
        UUID4 in string format (e.g., "a1b2c3d4-e5f6-7890-abcd-ef1234567890")
    """
    return str(uuid.uuid4())
