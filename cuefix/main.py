import argparse
import sys
import textwrap
from collections.abc import Sequence
from pathlib import Path

from cuefix.batch.exceptions import BatchError, NothingToExportError
from cuefix.batch.fixer import build_fixer
from cuefix.batch.loader import DocumentLoader
from cuefix.batch.models import FileStatus, FixedRecord
from cuefix.batch.output import OutputWriter
from cuefix.config.settings import Settings
from cuefix.encoding.candidates import AUTO, SUPPORTED_ENCODINGS
from cuefix.logging.logger import Log

EXIT_OK = 0
EXIT_RECORD_ERRORS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuefix",
        description="Repair garbled CUE sheets and re-emit them as UTF-8 with BOM.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="files or folders to fix")
    parser.add_argument(
        "--encoding",
        default=AUTO,
        choices=[value for value, _ in SUPPORTED_ENCODINGS],
        help="decode every file with this encoding instead of detecting it",
    )
    parser.add_argument(
        "--normalize",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="convert Traditional Chinese to Simplified",
    )
    parser.add_argument("--output", type=Path, default=None, help="output directory")
    parser.add_argument("--provider", default=None, help="detection provider")
    parser.add_argument(
        "--tree",
        action="store_true",
        help="write every file under the output directory instead of one archive",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="print the start of each fixed file below its status line",
    )
    return parser


def format_record(record: FixedRecord) -> str:
    if record.status == FileStatus.ERROR:
        return f"{record.path}: ERROR {record.error_message}"
    line = f"{record.path}: {record.detected_encoding} -> UTF-8"
    if record.possibly_garbled:
        line += " [may still be garbled, try --encoding]"
    return line


def run(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Entry point: load -> fix all -> report -> write output."""
    args = build_parser().parse_args(argv)
    settings = settings if settings is not None else Settings()
    updates: dict[str, object] = {}
    if args.normalize is not None:
        updates["normalize_script"] = args.normalize
    if args.output is not None:
        updates["output_dir"] = str(args.output)
    if args.provider is not None:
        updates["detection_provider"] = args.provider
    settings = settings.model_copy(update=updates)

    loader = DocumentLoader(settings.accepted_extensions)
    try:
        Log.configure(settings.log_level)
        documents = loader.load_paths(args.paths)
        fixer = build_fixer(settings)
    except (OSError, BatchError, ValueError) as exc:
        print(f"cuefix: {exc}", file=sys.stderr)
        return EXIT_USAGE
    if not documents:
        print("cuefix: no input files found", file=sys.stderr)
        return EXIT_USAGE

    fixer.ingest(documents)
    records = fixer.fix_all(args.encoding)
    for record in records:
        print(format_record(record))
        if args.preview and record.status == FileStatus.FIXED:
            print(textwrap.indent(record.preview(settings.preview_chars), "    "))

    writer = OutputWriter(Path(settings.output_dir), settings.archive_prefix)
    try:
        if args.tree:
            writer.write_tree(fixer.records)
            print(f"Output: {settings.output_dir}")
        else:
            print(f"Output: {writer.export(fixer.records)}")
    except NothingToExportError as exc:
        print(f"cuefix: {exc}", file=sys.stderr)
        return EXIT_RECORD_ERRORS

    if any(r.status == FileStatus.ERROR for r in records):
        return EXIT_RECORD_ERRORS
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
