from certifier.files.exceptions import FileReadError
from certifier.files.file_loader import FileLoader
from certifier.files.models import SelectedFile

__all__ = ["FileLoader", "FileReadError", "SelectedFile"]
