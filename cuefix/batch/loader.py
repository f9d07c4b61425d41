from collections.abc import Iterable
from pathlib import Path

from cuefix.batch.exceptions import DocumentReadError
from cuefix.batch.models import RawDocument


class DocumentLoader:
    """Reads input files and folders into RawDocuments.

    Files found inside a folder keep their path relative to the folder's
    parent, so the folder itself appears in the output tree.
    """

    DEFAULT_EXTENSIONS = (".cue", ".txt")

    def __init__(self, accepted_extensions: Iterable[str] | None = None) -> None:
        extensions = self.DEFAULT_EXTENSIONS if accepted_extensions is None else accepted_extensions
        self._extensions = {self._normalize_extension(e) for e in extensions}

    def load_paths(self, paths: Iterable[Path]) -> list[RawDocument]:
        """Load every named file and every accepted file under named folders.

        Raises:
            FileNotFoundError: if a path does not exist.
            DocumentReadError: if a file cannot be read.
        """
        documents: list[RawDocument] = []
        for path in paths:
            if path.is_dir():
                documents.extend(self._load_folder(path))
            elif path.exists():
                documents.append(self.load_file(path, path.name))
            else:
                raise FileNotFoundError(f"File not found: {path}")
        return documents

    def load_file(self, path: Path, relative_path: str) -> RawDocument:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DocumentReadError(f"Cannot read {path}: {exc}") from exc
        return RawDocument(name=path.name, path=relative_path, raw=raw)

    def accepts(self, path: Path) -> bool:
        return path.suffix.lower() in self._extensions

    def _load_folder(self, folder: Path) -> list[RawDocument]:
        root = Path(folder.resolve().name)
        return [
            self.load_file(path, (root / path.relative_to(folder)).as_posix())
            for path in sorted(folder.rglob("*"))
            if path.is_file() and self.accepts(path)
        ]

    @staticmethod
    def _normalize_extension(extension: str) -> str:
        extension = extension.strip().lower()
        return extension if extension.startswith(".") else f".{extension}"
