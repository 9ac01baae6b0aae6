"""Custom exceptions for file organizer."""


class FileOrganizerError(Exception):
    """Base exception for file organizer errors."""
    pass


class ConfigurationError(FileOrganizerError):
    """Raised when there's an error in configuration."""
    pass


class OperationLogOverflowError(FileOrganizerError):
    """Raised when a bounded operation log is full."""
    pass
