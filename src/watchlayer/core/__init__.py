"""Core modules for watchlayer - centralized definitions and utilities."""

from watchlayer.core.errors import (
    ConfigurationError,
    ExitCode,
    MalformedDescriptorError,
    ProviderError,
    ValidationError,
    WarningResult,
    WatchlayerError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "WatchlayerError",
    "ConfigurationError",
    "ProviderError",
    "ValidationError",
    "MalformedDescriptorError",
    "WarningResult",
    "format_error_message",
    "main_with_error_handling",
]
