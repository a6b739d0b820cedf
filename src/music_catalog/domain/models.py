"""Shared helpers for catalog domain models."""


def resolve_active(flag: bool | None) -> bool:
    """Return the stored ``active`` value for an optional input flag."""
    return True if flag is None else flag
