"""Argument guards shared by factories and builders."""

from __future__ import annotations

from typing import TypeVar

from payment_request.domain.exceptions import InvalidArgumentError

T = TypeVar("T")


def check_not_none(value: T | None, name: str) -> T:
    """Return value unchanged, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be null")
    return value


def check_not_empty(value: str | None, name: str) -> str:
    """Return a non-empty string unchanged.

    Raises:
        InvalidArgumentError: If value is None, not a string, or "".
    """
    check_not_none(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def check_id(value: int | None, name: str) -> int:
    """Return a numeric identifier unchanged.

    bool is rejected even though it subclasses int.
    """
    check_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value
