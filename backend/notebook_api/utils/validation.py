from __future__ import annotations


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def require_not_blank(value: str | None, message: str) -> str:
    """Return value unchanged, raising ValueError(message) if it is blank."""
    if is_blank(value):
        raise ValueError(message)
    return value
