"""File type classification."""

from __future__ import annotations

from enum import StrEnum


class FileType(StrEnum):
    """Classification tag of a file. Only IMAGE files reject appends."""

    IMAGE = "image"
    ASCII = "ascii"
    BINARY = "binary"
