"""Custom exceptions for differential simulation."""


class VirtualDiffError(Exception):
    """Base exception for simulation errors."""


class ConfigurationError(VirtualDiffError):
    """Raised when model, scenario, or driver configuration is invalid."""
