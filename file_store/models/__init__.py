"""Pydantic data models for the file content store."""

from file_store.models.config import Config
from file_store.models.file import (
    File,
    FileStoreError,
    InvalidContentError,
    WrongFileTypeError,
)
from file_store.models.file_type import FileType

__all__ = [
    "Config",
    "File",
    "FileStoreError",
    "FileType",
    "InvalidContentError",
    "WrongFileTypeError",
]
