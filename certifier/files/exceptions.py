from certifier.errors import CertificationError, ErrorKind


class FileReadError(CertificationError):
    """Raised when the selected file's bytes cannot be read."""

    kind = ErrorKind.FILE_UNREADABLE
