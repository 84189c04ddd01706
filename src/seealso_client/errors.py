"""Custom exceptions for the SeeAlso client."""


class SeeAlsoError(Exception):
    """Base exception for this project."""


class ConfigError(SeeAlsoError):
    """Raised when runtime configuration is invalid."""


class TransportError(SeeAlsoError):
    """Raised when a remote lookup fails before a payload arrives."""


class PayloadError(SeeAlsoError):
    """Raised when a response body cannot be decoded."""
