"""Exception types raised by the BrawlAPI client."""

from __future__ import annotations

from typing import Optional


class BrawlAPIError(Exception):
    """Base class for all brawlapi exceptions."""


class ConfigurationError(BrawlAPIError):
    """Raised when the client is missing required configuration."""


class InvalidTagError(BrawlAPIError, ValueError):
    """Raised when a player or club tag fails validation.

    No request is sent when this is raised, so the caller can fix the tag
    and try again.
    """

    def __init__(self, tag: object) -> None:
        super().__init__(f"Invalid tag: {tag!r}")
        self.tag = tag


class InvalidArgumentError(BrawlAPIError, TypeError):
    """Raised when an operation argument has the wrong type."""

    def __init__(self, name: str, value: object, expected: str) -> None:
        super().__init__(f"{name} must be {expected}, got {value!r}")
        self.name = name
        self.value = value


class TransportError(BrawlAPIError):
    """Raised when a request fails at the HTTP layer.

    Parameters
    ----------
    message
        Human readable description of the failure.
    url
        URL of the failed request.
    status_code
        HTTP status code, when the server answered.
    cause
        The underlying exception raised by the session, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


__all__ = [
    "BrawlAPIError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidTagError",
    "TransportError",
]
