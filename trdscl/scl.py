"""Writer for SCL (Hobeta "SINCLAIR") archive images."""

from __future__ import annotations

import struct

from .writer import FileWriter, WriterError, pad_name

SIGNATURE = b"SINCLAIR"
SECTOR_SIZE = 256
MAX_FILES = 128
MAX_FILE_SECTORS = 255
MAX_FILE_SIZE = SECTOR_SIZE * MAX_FILE_SECTORS
HEADER_SIZE = 9
ITEM_SIZE = 14

_ITEM = struct.Struct("<8ssHHB")
_CHECKSUM = struct.Struct("<I")


def checksum(data: bytes) -> int:
    """Return the 32-bit sum of all bytes of ``data``."""
    return sum(data) & 0xFFFFFFFF


class SclFileWriter(FileWriter):
    """Collects files and serializes them as an SCL image."""

    def __init__(self) -> None:
        self._items: list[bytes] = []
        self._payload = bytearray()

    def push_back(self, name, ext, start, data) -> None:
        if len(self._items) >= MAX_FILES - 1:
            raise WriterError("too many files")
        size = len(data)
        if size == 0 or size > MAX_FILE_SIZE:
            raise WriterError(f"file size {size} is out of range 1..{MAX_FILE_SIZE}")
        sectors = -(-size // SECTOR_SIZE)
        if sectors > MAX_FILE_SECTORS:
            raise WriterError("file takes too many sectors")
        padded_name = pad_name(name, 8)
        ext_byte = pad_name(ext, 1)
        if not 0 <= start <= 0xFFFF:
            raise WriterError(f"start {start} does not fit into 16 bits")
        self._items.append(_ITEM.pack(padded_name, ext_byte, start, size, sectors))
        self._payload += data
        self._payload += bytes(sectors * SECTOR_SIZE - size)

    def serialize(self) -> bytes:
        body = SIGNATURE + bytes([len(self._items)]) + b"".join(self._items) + self._payload
        return body + _CHECKSUM.pack(checksum(body))