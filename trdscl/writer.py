"""Common interface of disk image writers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WriterError(ValueError):
    """Raised when a file cannot be placed into an image."""


def pad_name(name: str | bytes, width: int) -> bytes:
    """Encode ``name`` and pad it with spaces to exactly ``width`` bytes."""
    raw = name.encode("utf-8", "surrogateescape") if isinstance(name, str) else bytes(name)
    if len(raw) > width:
        raise WriterError(f"name {name!r} is longer than {width} bytes")
    return raw.ljust(width, b" ")


class FileWriter(ABC):
    """A builder that collects files and produces a disk image."""

    @abstractmethod
    def push_back(self, name: str | bytes, ext: str | bytes, start: int, data: bytes) -> None:
        """Append a file to the image; raise WriterError if it does not fit."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the complete image."""