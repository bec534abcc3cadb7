"""Domain-specific errors for ridhelper."""

from __future__ import annotations


class RidHelperError(Exception):
    """Base error for ridhelper."""


class UnknownPlatformError(RidHelperError):
    """Raised when a caller asks to simulate an OS/architecture ridhelper does not know."""
