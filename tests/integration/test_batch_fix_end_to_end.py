"""End-to-end batch fixing over real files on disk.

Runs the loader, the configured fixer and the output writer together with
the local heuristic detector, and with the example provider standing in for
a remote one.
"""

import io
import zipfile
from pathlib import Path

import pytest

from cuefix.batch import DocumentLoader, FileStatus, OutputWriter, build_fixer
from cuefix.batch.output import BOM
from cuefix.config.settings import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


@pytest.fixture()
def album(
    tmp_path: Path,
    gb18030_cue_bytes: bytes,
    ascii_cue_bytes: bytes,
    shift_jis_cue_bytes: bytes,
    western_cue_bytes: bytes,
) -> Path:
    root = tmp_path / "Mixed"
    (root / "jp").mkdir(parents=True)
    (root / "cn.cue").write_bytes(gb18030_cue_bytes)
    (root / "plain.cue").write_bytes(ascii_cue_bytes)
    (root / "jp" / "jp.cue").write_bytes(shift_jis_cue_bytes)
    (root / "western.txt").write_bytes(western_cue_bytes)
    (root / "folder.jpg").write_bytes(b"\xff\xd8")
    return root


class TestHeuristicBatch:
    def test_mixed_encodings_are_detected(self, album: Path) -> None:
        fixer = build_fixer(_settings())
        fixer.ingest(DocumentLoader().load_paths([album]))

        records = fixer.fix_all()

        detected = {r.path: r.detected_encoding for r in records}
        assert detected == {
            "Mixed/cn.cue": "gb18030",
            "Mixed/jp/jp.cue": "shift-jis",
            "Mixed/plain.cue": "utf-8",
            "Mixed/western.txt": "windows-1252",
        }
        assert all(r.status == FileStatus.FIXED for r in records)
        assert not any(r.possibly_garbled for r in records)

    def test_decoded_text_matches_source(
        self, album: Path, cue_text: str
    ) -> None:
        fixer = build_fixer(_settings())
        fixer.ingest(DocumentLoader().load_paths([album]))
        fixer.fix_all()

        by_path = {r.path: r for r in fixer.records}
        assert by_path["Mixed/cn.cue"].content == cue_text
        assert 'TITLE "Café"' in by_path["Mixed/western.txt"].content
        assert 'TITLE "ｱ"' in by_path["Mixed/jp/jp.cue"].content

    def test_archive_holds_bom_prefixed_tree(
        self, album: Path, tmp_path: Path, cue_text: str
    ) -> None:
        fixer = build_fixer(_settings())
        fixer.ingest(DocumentLoader().load_paths([album]))
        fixer.fix_all()

        archive = OutputWriter(tmp_path / "out", clock=lambda: 1700000000.0).export(
            fixer.records
        )

        assert archive.name == "Fixed_CUE_Files_1700000000000.zip"
        with zipfile.ZipFile(io.BytesIO(archive.read_bytes())) as zf:
            assert sorted(zf.namelist()) == [
                "Mixed/cn.cue",
                "Mixed/jp/jp.cue",
                "Mixed/plain.cue",
                "Mixed/western.txt",
            ]
            assert zf.read("Mixed/cn.cue") == BOM + cue_text.encode("utf-8")
            for name in zf.namelist():
                assert zf.read(name).startswith(BOM)

    def test_existing_bom_is_not_doubled(self, tmp_path: Path, cue_text: str) -> None:
        source = tmp_path / "bom.cue"
        source.write_bytes(BOM + cue_text.encode("utf-8"))
        fixer = build_fixer(_settings())
        fixer.ingest(DocumentLoader().load_paths([source]))
        fixer.fix_all()

        written = OutputWriter(tmp_path / "out").export(fixer.records)

        assert written.read_bytes() == BOM + cue_text.encode("utf-8")


class TestManualOverrideWithNormalization:
    def test_big5_override_is_simplified(self, tmp_path: Path) -> None:
        source = tmp_path / "tw.cue"
        source.write_bytes('TITLE "國語歌曲"\nFILE "a.wav" WAVE\n'.encode("big5"))
        fixer = build_fixer(_settings(normalize_script=True))
        fixer.ingest(DocumentLoader().load_paths([source]))

        (record,) = fixer.fix_all("big5")

        assert record.status == FileStatus.FIXED
        assert record.detected_encoding == "big5"
        assert record.result is not None
        assert record.result.text == 'TITLE "國語歌曲"\nFILE "a.wav" WAVE\n'
        assert record.content == 'TITLE "国语歌曲"\nFILE "a.wav" WAVE\n'


class TestExampleProvider:
    def test_remote_hint_is_verified_locally(
        self, album: Path
    ) -> None:
        fixer = build_fixer(_settings(detection_provider="example"))
        fixer.ingest(DocumentLoader().load_paths([album]))

        fixer.fix_all()

        by_path = {r.path: r for r in fixer.records}
        assert by_path["Mixed/cn.cue"].result.strategy == "remote"  # type: ignore[union-attr]
        jp = by_path["Mixed/jp/jp.cue"]
        assert jp.detected_encoding == "shift-jis"
        assert jp.result.strategy == "heuristic"  # type: ignore[union-attr]
