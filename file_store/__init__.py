"""In-memory file content store with CRC-32 checksums.

Logging is quiet (WARNING and above, to stderr) until the application calls
``configure_logging``, which reads LOG_LEVEL and LOG_FORMAT when called
without arguments.
"""

from file_store.models.file import (
    File,
    FileStoreError,
    InvalidContentError,
    WrongFileTypeError,
)
from file_store.models.file_type import FileType
from file_store.utils.logger import configure_library_defaults, configure_logging

configure_library_defaults()

__all__ = [
    "File",
    "FileStoreError",
    "FileType",
    "InvalidContentError",
    "WrongFileTypeError",
    "configure_logging",
]
