class EncodingError(Exception):
    """Base exception for all byte-decoding errors."""


class DecodeError(EncodingError):
    """Raised when bytes are invalid under strict decoding of an encoding."""

    def __init__(self, encoding: str, reason: str) -> None:
        super().__init__(f"Cannot decode as {encoding}: {reason}")
        self.encoding = encoding
        self.reason = reason


class UnsupportedEncodingLabel(EncodingError, ValueError):
    """Raised when a label outside the candidate set is requested explicitly."""
