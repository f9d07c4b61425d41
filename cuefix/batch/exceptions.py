class BatchError(Exception):
    """Base exception for all batch-related errors."""


class RecordNotFoundError(BatchError):
    """Raised when a record id is not in the batch."""


class RecordBusyError(BatchError):
    """Raised when a fix is requested for a record that is already being fixed."""


class DocumentReadError(BatchError):
    """Raised when an input file cannot be read from disk."""


class NothingToExportError(BatchError):
    """Raised when output is requested but no record has been fixed."""
