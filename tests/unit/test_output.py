"""Tests for UTF-8-with-BOM output and archive packaging."""

import io
import zipfile
from pathlib import Path

import pytest

from cuefix.batch.exceptions import NothingToExportError
from cuefix.batch.models import FileStatus, FixedRecord, RawDocument
from cuefix.batch.output import BOM, OutputWriter, build_archive, encode_with_bom
from cuefix.detection.models import DetectionResult

_NOW = 1700000000.0


def _record(path: str, text: str, status: FileStatus = FileStatus.FIXED) -> FixedRecord:
    document = RawDocument(name=path.rsplit("/", 1)[-1], path=path, raw=b"")
    return FixedRecord(
        id=path,
        document=document,
        result=DetectionResult(text=text, encoding="gb18030"),
        status=status,
    )


def _writer(tmp_path: Path) -> OutputWriter:
    return OutputWriter(tmp_path, clock=lambda: _NOW)


class TestEncodeWithBom:
    def test_prefixes_bom(self) -> None:
        assert encode_with_bom("歌") == b"\xef\xbb\xbf" + "歌".encode("utf-8")

    def test_empty_text_is_just_bom(self) -> None:
        assert encode_with_bom("") == BOM


class TestBuildArchive:
    def test_duplicate_paths_keep_first(self) -> None:
        data = build_archive([("a.cue", b"first"), ("a.cue", b"second"), ("b.cue", b"b")])

        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            assert zf.namelist() == ["a.cue", "b.cue"]
            assert zf.read("a.cue") == b"first"

    def test_entries_are_deflated(self) -> None:
        data = build_archive([("a.cue", b"x" * 1000)])

        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            assert zf.getinfo("a.cue").compress_type == zipfile.ZIP_DEFLATED


class TestExport:
    def test_single_fixed_record_is_written_directly(self, tmp_path: Path) -> None:
        records = [_record("Album/a.cue", "歌"), _record("b.cue", "x", FileStatus.ERROR)]

        target = _writer(tmp_path).export(records)

        assert target == tmp_path / "a.cue"
        assert target.read_bytes() == encode_with_bom("歌")

    def test_many_fixed_records_become_archive(self, tmp_path: Path) -> None:
        records = [_record("Album/CD1.cue", "一"), _record("Album/CD2.cue", "二")]

        target = _writer(tmp_path).export(records)

        assert target.name == "Fixed_CUE_Files_1700000000000.zip"
        with zipfile.ZipFile(target) as zf:
            assert zf.namelist() == ["Album/CD1.cue", "Album/CD2.cue"]
            assert zf.read("Album/CD2.cue") == encode_with_bom("二")

    def test_nothing_fixed_raises(self, tmp_path: Path) -> None:
        records = [_record("a.cue", "x", FileStatus.PENDING)]

        with pytest.raises(NothingToExportError):
            _writer(tmp_path).export(records)

    def test_archive_prefix_is_configurable(self, tmp_path: Path) -> None:
        writer = OutputWriter(tmp_path, archive_prefix="Batch", clock=lambda: 1.5)
        assert writer.archive_name() == "Batch_1500.zip"


class TestWriteTree:
    def test_writes_fixed_records_at_relative_paths(self, tmp_path: Path) -> None:
        records = [
            _record("Album/CD1/a.cue", "一"),
            _record("Album/b.cue", "x", FileStatus.ERROR),
        ]

        written = _writer(tmp_path).write_tree(records)

        assert written == [tmp_path / "Album" / "CD1" / "a.cue"]
        assert written[0].read_bytes() == encode_with_bom("一")
        assert not (tmp_path / "Album" / "b.cue").exists()
