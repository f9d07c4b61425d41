from abc import ABC, abstractmethod

from cuefix.detection.models import DetectionResult


class BaseDetector(ABC):
    """Contract for all encoding detection strategies."""

    @abstractmethod
    def detect(self, raw: bytes, encoding: str | None = None) -> DetectionResult:
        """Decode raw document bytes into text.

        Args:
            raw: Document content exactly as read from disk.
            encoding: Explicit encoding label to use instead of detection.
                      ``None`` or ``"auto"`` requests automatic detection.

        Returns:
            DetectionResult with the decoded text and the winning label.

        Raises:
            TypeError: if *raw* is not a byte buffer.
            UnsupportedEncodingLabel: if *encoding* is not a supported label.
        """
