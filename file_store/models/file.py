"""File model holding typed character content and its CRC-32 checksum."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, PrivateAttr

from file_store.core.checksum import calculate_crc32, format_crc32
from file_store.core.content import normalize_units, to_low_bytes
from file_store.models.file_type import FileType

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)


class FileStoreError(Exception):
    """Base class for errors raised by file operations."""


class InvalidContentError(FileStoreError):
    """Raised when appended content is missing or not a sequence of 16-bit characters."""


class WrongFileTypeError(FileStoreError):
    """Raised when content is appended to an IMAGE file."""


class File(BaseModel):
    """In-memory file: a type tag plus an ordered sequence of character units.

    Content starts empty and only grows through ``append``. Instances are not
    thread-safe; concurrent callers must serialize access themselves.
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    kind: FileType | None = None
    _content: list[str] = PrivateAttr(default_factory=list)

    def set_kind(self, kind: FileType | None) -> None:
        """Assign the file type, replacing any previous value.

        Raises pydantic.ValidationError when ``kind`` is neither a FileType
        member nor None, e.g. the raw string "image".
        """
        self.kind = kind

    def append(self, new_content: Sequence[str] | None) -> None:
        """Append character units to the end of the content.

        Raises InvalidContentError for None or malformed units, then
        WrongFileTypeError for IMAGE files. Content is untouched on failure.
        """
        if new_content is None:
            msg = "new_content must not be None"
            raise InvalidContentError(msg)

        try:
            units = normalize_units(new_content)
        except ValueError as exc:
            raise InvalidContentError(str(exc)) from exc

        if self.kind is FileType.IMAGE:
            msg = "Cannot append content to an IMAGE file"
            raise WrongFileTypeError(msg)

        self._content.extend(units)
        logger.debug("content_appended", added=len(units), length=len(self._content))

    def get_content(self) -> tuple[str, ...]:
        """Return a read-only snapshot of the current content."""
        return tuple(self._content)

    def get_checksum(self) -> int:
        """Return the CRC-32 of the low byte of every character unit.

        Empty content is defined to have checksum 0.
        """
        if not self._content:
            return 0

        checksum = calculate_crc32(to_low_bytes(self._content))
        logger.debug(
            "checksum_computed", length=len(self._content), checksum=format_crc32(checksum)
        )
        return checksum
