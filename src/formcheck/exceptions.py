"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass
class UnknownErrorKeyError(PackageError):
    """Raised when an error key has no template or anchor classification."""

    error_key: str
    message: str = "Unknown error key"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: '{self.error_key}'"


@dataclass
class PageLoadError(PackageError):
    """Raised when a page document cannot be loaded."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message
