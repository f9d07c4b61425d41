import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class RecordFormatter(logging.Formatter):
    """Appends ``[record <id>]`` when a log call names the record it is about."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        record_id = getattr(record, "record_id", None)
        if record_id:
            line = f"{line} [record {record_id}]"
        return line


class Log:
    """Process-wide logger for the cuefix package.

    Output goes to stderr by default; stdout carries the command-line report.
    Keyword arguments become attributes of the log record.
    """

    _logger: logging.Logger = logging.getLogger("cuefix")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one stream handler, once."""
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(RecordFormatter(LOG_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=fields)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=fields)

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=fields)
