from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SelectedFile:
    """A user-selected payload: name, declared size, MIME type and a byte source.

    Bytes are pulled lazily through ``reader`` so a re-read (upload after
    hashing) always reflects the underlying source.
    """

    name: str
    size: int
    reader: Callable[[], bytes] = field(repr=False, compare=False)
    mime_type: str | None = None

    @property
    def content_type(self) -> str:
        return self.mime_type or DEFAULT_MIME_TYPE

    def read_bytes(self) -> bytes:
        return self.reader()
