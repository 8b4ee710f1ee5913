import mimetypes
from pathlib import Path

from certifier.files.exceptions import FileReadError
from certifier.files.models import SelectedFile


class FileLoader:
    """Builds SelectedFile payloads from local paths or in-memory bytes."""

    def load(self, path: Path | str) -> SelectedFile:
        """Describe a local file without reading its contents.

        Raises:
            FileReadError: if the path does not exist or is not a regular file.
        """
        path = Path(path)
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return SelectedFile(
            name=path.name,
            size=path.stat().st_size,
            reader=lambda: self._read(path),
            mime_type=mime_type,
        )

    @staticmethod
    def from_bytes(name: str, data: bytes, mime_type: str | None = None) -> SelectedFile:
        return SelectedFile(
            name=name,
            size=len(data),
            reader=lambda: data,
            mime_type=mime_type,
        )

    @staticmethod
    def _read(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read file {path}: {exc}") from exc
