"""Errors raised while fetching and decoding the weekly menu."""
from typing import Optional


class MenuError(Exception):
    """Base class for failures of one fetch cycle."""


class NetworkError(MenuError):
    """The request failed, returned an error status or came back without a body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(MenuError):
    """The body is not JSON, not an array, or a record misses a required field."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
