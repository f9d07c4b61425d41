from dataclasses import FrozenInstanceError, dataclass
from enum import Enum
from typing import ClassVar

from cuefix.classification.classifier import is_garbled
from cuefix.detection.models import DetectionResult


class FileStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    FIXED = "fixed"
    ERROR = "error"


@dataclass(frozen=True)
class RawDocument:
    """Input file content as read from disk, never modified."""

    name: str
    path: str  # relative path, "/"-separated, used to rebuild the folder tree
    raw: bytes

    @property
    def size(self) -> int:
        return len(self.raw)


@dataclass
class FixedRecord:
    """One document moving through the fix workflow.

    Only status and content fields change. ``id`` and ``document`` are set
    once by the constructor and cannot be reassigned.
    """

    _IDENTITY_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "document"})

    id: str
    document: RawDocument
    decoded_content: str = ""
    detected_encoding: str = "unknown"
    result: DetectionResult | None = None
    normalized_text: str | None = None
    status: FileStatus = FileStatus.PENDING
    error_message: str | None = None

    @property
    def name(self) -> str:
        return self.document.name

    @property
    def path(self) -> str:
        return self.document.path

    @property
    def content(self) -> str:
        """Final text: normalized if normalization ran, else the decoded text."""
        if self.normalized_text is not None:
            return self.normalized_text
        if self.result is not None:
            return self.result.text
        return ""

    @property
    def possibly_garbled(self) -> bool:
        return self.status == FileStatus.FIXED and is_garbled(self.content)

    def preview(self, chars: int = 200) -> str:
        return self.content[:chars]

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._IDENTITY_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)
