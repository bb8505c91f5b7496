"""devassets package root."""

from devassets.exceptions import (
    ConfigurationUnavailable,
    DevAssetsError,
    InvalidPayload,
    InvalidSelection,
)

__all__ = [
    "__version__",
    "ConfigurationUnavailable",
    "DevAssetsError",
    "InvalidPayload",
    "InvalidSelection",
]

__version__ = "0.1.0"
