"""Typed exceptions for configuration, layout geometry and I/O formats."""


class StyledPdfError(Exception):
    """Base class for errors raised by the package."""


class ConfigurationError(StyledPdfError, ValueError):
    """Raised when configuration values cannot be used as given."""


class LayoutConfigError(ConfigurationError):
    """Raised when page geometry leaves no room to lay out content."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no parser is registered for a file format."""
