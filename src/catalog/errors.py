"""Exception hierarchy for catalog discovery and remote access."""
from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for every error raised by the catalog package."""


class RemoteError(CatalogError):
    """The remote repository could not serve a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(RemoteError):
    """The repository API refused the request because the rate limit was reached."""


class RemoteNotFoundError(RemoteError):
    """The requested repository path does not exist."""


class AuthenticationError(RemoteError):
    """The configured access token was rejected."""


class ComponentNotFoundError(CatalogError):
    """No content location yielded a readable file for a component."""

    def __init__(self, name: str, variant: str, kind: str) -> None:
        if kind == "demo":
            message = f'Demo for component "{name}" not found'
        else:
            message = f'Component "{name}" not found for variant "{variant}"'
        super().__init__(message)
        self.name = name
        self.variant = variant
        self.kind = kind
