from cuefix.batch.fixer import BatchFixer, build_fixer
from cuefix.batch.loader import DocumentLoader
from cuefix.batch.models import FileStatus, FixedRecord, RawDocument
from cuefix.batch.output import OutputWriter, encode_with_bom

__all__ = [
    "BatchFixer",
    "DocumentLoader",
    "FileStatus",
    "FixedRecord",
    "OutputWriter",
    "RawDocument",
    "build_fixer",
    "encode_with_bom",
]
