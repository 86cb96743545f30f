"""Shared test fixtures for the file content store."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from file_store.models.file import File
from file_store.models.file_type import FileType
from file_store.utils.logger import configure_library_defaults


@pytest.fixture
def empty_file() -> File:
    """Provide a freshly constructed file with no type and no content."""
    return File()


@pytest.fixture
def ascii_file() -> File:
    """Provide an ASCII-typed file with no content."""
    file = File()
    file.set_kind(FileType.ASCII)
    return file


@pytest.fixture
def image_file() -> File:
    """Provide an IMAGE-typed file, which rejects appends."""
    file = File()
    file.set_kind(FileType.IMAGE)
    return file


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore the package logging defaults after a test reconfigures logging."""
    yield
    structlog.reset_defaults()
    configure_library_defaults()
