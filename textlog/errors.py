"""Errors raised by the formatted-text log writer."""


class TextLogError(RuntimeError):
    """Base class for all writer errors."""


class ConfigurationError(TextLogError):
    """Raised when the writer configuration cannot be resolved."""


class DirectoryCreationError(TextLogError):
    """Raised when the log directory tree cannot be created."""


class FileOpenError(TextLogError):
    """Raised when the log file cannot be opened for appending."""


class HeaderWriteError(TextLogError):
    """Raised when the header of a new log file cannot be written."""


class EntryWriteError(TextLogError):
    """Raised when a rendered entry cannot be appended."""


class InvalidEntryError(EntryWriteError):
    """Raised when an entry's timestamp cannot be interpreted."""
