"""Error taxonomy for asset generation."""

from __future__ import annotations


class DevAssetsError(RuntimeError):
    """Base class for errors surfaced to callers of devassets."""


class ConfigurationUnavailable(DevAssetsError):
    """Raised when the workspace information cannot drive generation.

    The caller is expected to surface a user-visible message instead of
    writing an empty document.
    """


class InvalidSelection(DevAssetsError):
    """Raised when the startup project index is missing or out of range."""

    def __init__(self, message: str, *, index: int | None = None, count: int = 0):
        super().__init__(message)
        self.index = index
        self.count = count


class InvalidPayload(DevAssetsError):
    """Raised when a command payload is missing or not a mapping."""
