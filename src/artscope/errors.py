"""Exception hierarchy shared by URL construction, transport and hydration."""

from typing import Optional


class ArtscopeError(Exception):
    """Base class for every error raised by artscope."""


class InvalidArgument(ArtscopeError, ValueError):
    """Raised for empty identifier lists and unknown or unsupported resource kinds."""


class RangeViolation(ArtscopeError, ValueError):
    """Raised when an image-transform parameter is out of range."""

    def __init__(self, message: str, parameter: str):
        super().__init__(message)
        self.parameter = parameter


class SchemaViolation(ArtscopeError, TypeError):
    """Raised when a fetched payload does not match the expected resource schema."""

    def __init__(self, message: str, expected: Optional[str] = None):
        super().__init__(message)
        self.expected = expected


class TransportError(ArtscopeError, RuntimeError):
    """Raised when a request fails or its body cannot be decoded as JSON."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigError(ArtscopeError, ValueError):
    """Raised when the config file cannot be parsed or holds invalid values."""
