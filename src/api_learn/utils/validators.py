"""Form validation helpers used by the request controllers."""

from __future__ import annotations

from typing import Dict, Optional

MIN_TITLE_LENGTH = 3
MIN_BODY_LENGTH = 10
MIN_USER_ID = 1
MAX_USER_ID = 10


def validate_title(value: Optional[str], *, min_length: int = 0) -> Optional[str]:
    if value is None or not value.strip():
        return "Title is required"
    if len(value.strip()) < min_length:
        return f"Title must be at least {min_length} characters"
    return None


def validate_body(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return "Body is required"
    if len(value.strip()) < MIN_BODY_LENGTH:
        return f"Body must be at least {MIN_BODY_LENGTH} characters"
    return None


def validate_user_id(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return "User ID is required"
    try:
        user_id = int(value.strip())
    except ValueError:
        return "User ID must be a number"
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        return f"User ID must be between {MIN_USER_ID} and {MAX_USER_ID}"
    return None


def collect_errors(**messages: Optional[str]) -> Dict[str, str]:
    """Keep only the fields that produced a message."""

    return {name: message for name, message in messages.items() if message}
