import codecs
import io
import time
import zipfile
from collections.abc import Callable, Iterable
from pathlib import Path

from cuefix.batch.exceptions import NothingToExportError
from cuefix.batch.models import FileStatus, FixedRecord
from cuefix.logging.logger import Log

BOM = codecs.BOM_UTF8


def encode_with_bom(text: str) -> bytes:
    """Encode *text* as UTF-8 prefixed with the EF BB BF byte-order mark."""
    return BOM + text.encode("utf-8")


def build_archive(entries: Iterable[tuple[str, bytes]]) -> bytes:
    """Pack (relative_path, data) pairs into an in-memory zip archive.

    Duplicate paths keep the first entry.
    """
    buffer = io.BytesIO()
    seen: set[str] = set()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=6) as zf:
        for relative_path, data in entries:
            if relative_path in seen:
                Log.warning(f"Skipping duplicate archive entry {relative_path}")
                continue
            seen.add(relative_path)
            zf.writestr(relative_path, data)
    return buffer.getvalue()


class OutputWriter:
    """Writes fixed records as UTF-8 files with BOM, or as one zip archive."""

    def __init__(
        self,
        output_dir: Path,
        archive_prefix: str = "Fixed_CUE_Files",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._output_dir = output_dir
        self._archive_prefix = archive_prefix
        self._clock = clock

    def export(self, records: Iterable[FixedRecord]) -> Path:
        """Write one file when a single record is fixed, else one archive.

        Raises:
            NothingToExportError: if no record is fixed.
        """
        fixed = self._fixed(records)
        if len(fixed) == 1:
            return self.write_file(fixed[0])
        return self.write_archive(fixed)

    def write_file(self, record: FixedRecord) -> Path:
        target = self._output_dir / record.name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(encode_with_bom(record.content))
        Log.info(f"Wrote {target}")
        return target

    def write_archive(self, records: Iterable[FixedRecord]) -> Path:
        fixed = self._fixed(records)
        archive = build_archive((r.path, encode_with_bom(r.content)) for r in fixed)
        target = self._output_dir / self.archive_name()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(archive)
        Log.info(f"Wrote archive {target} with {len(fixed)} files")
        return target

    def write_tree(self, records: Iterable[FixedRecord]) -> list[Path]:
        """Write every fixed record under the output dir at its relative path."""
        written: list[Path] = []
        for record in self._fixed(records):
            target = self._output_dir / record.path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(encode_with_bom(record.content))
            written.append(target)
        Log.info(f"Wrote {len(written)} files under {self._output_dir}")
        return written

    def archive_name(self) -> str:
        return f"{self._archive_prefix}_{int(self._clock() * 1000)}.zip"

    @staticmethod
    def _fixed(records: Iterable[FixedRecord]) -> list[FixedRecord]:
        fixed = [r for r in records if r.status == FileStatus.FIXED]
        if not fixed:
            raise NothingToExportError("No fixed records to export")
        return fixed
