"""Typed exceptions for the export pipeline and I/O formats."""


class ThreadpressError(Exception):
    """Base class for pipeline errors."""


class SourceNotFoundError(ThreadpressError, FileNotFoundError):
    """Raised when the input document does not exist."""


class SourceDecodeError(ThreadpressError, ValueError):
    """Raised when the input document cannot be decoded as text."""


class EmptyInputError(ThreadpressError, ValueError):
    """Raised when there is nothing to export."""


class ConfigError(ThreadpressError, ValueError):
    """Raised for an invalid page geometry or layout configuration."""


class OutputWriteError(ThreadpressError, OSError):
    """Raised when the output file could not be written."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
