"""Writer for TRD (TR-DOS disk) images."""

from __future__ import annotations

import struct
from enum import IntEnum

from .writer import FileWriter, WriterError, pad_name

BYTES_PER_SECTOR = 256
MAX_FILES = 128
MAX_BLOCKS_PER_FILE = 255
MAX_FILE_SIZE = BYTES_PER_SECTOR * MAX_BLOCKS_PER_FILE
SECTORS_PER_TRACK = 16
MAX_TRACKS = 160
MAX_BLOCKS = SECTORS_PER_TRACK * MAX_TRACKS
MAX_PAYLOAD_BLOCKS = SECTORS_PER_TRACK * (MAX_TRACKS - 1)
MAX_DISK_SIZE = MAX_BLOCKS * BYTES_PER_SECTOR
MAX_DISK_PAYLOAD_SIZE = MAX_PAYLOAD_BLOCKS * BYTES_PER_SECTOR
ITEM_SIZE = 16
CATALOG_SIZE = ITEM_SIZE * MAX_FILES
INFO_OFFSET = CATALOG_SIZE
TRDOS_ID = 0x10

_ITEM = struct.Struct("<8ssHHBBB")
_INFO_FIELDS = struct.Struct("<BBBBHB")
_INFO_FIELDS_OFFSET = 225
_UNUSED_SECTORS = (SECTORS_PER_TRACK - 9) * BYTES_PER_SECTOR


class DiskType(IntEnum):
    """TR-DOS disk geometry codes."""

    DOUBLE_SIDED_80 = 0x16
    DOUBLE_SIDED_40 = 0x17
    SINGLE_SIDED_80 = 0x18
    SINGLE_SIDED_40 = 0x19


class TrdFileWriter(FileWriter):
    """Collects files and serializes them as a full 640 KiB TRD image."""

    def __init__(self) -> None:
        self._items: list[bytes] = []
        self._payload = bytearray(MAX_DISK_PAYLOAD_SIZE)
        self._disk_type = DiskType.DOUBLE_SIDED_80
        self._first_free_sector = 0
        self._first_free_track = 1
        self._free_blocks = MAX_PAYLOAD_BLOCKS

    def push_back(self, name, ext, start, data) -> None:
        if len(self._items) >= MAX_FILES:
            raise WriterError("too many files")
        size = len(data)
        if size == 0 or size > MAX_FILE_SIZE:
            raise WriterError(f"file size {size} is out of range 1..{MAX_FILE_SIZE}")
        blocks = -(-size // BYTES_PER_SECTOR)
        if blocks > MAX_BLOCKS_PER_FILE:
            raise WriterError("file takes too many sectors")

        file_block = self._first_free_sector + (self._first_free_track - 1) * SECTORS_PER_TRACK
        offset = file_block * BYTES_PER_SECTOR
        if offset + size > len(self._payload):
            raise WriterError("disk is full")
        self._payload[offset:offset + size] = data

        padded_name = pad_name(name, 8)
        ext_byte = pad_name(ext, 1)
        if not 0 <= start <= 0xFFFF:
            raise WriterError(f"start {start} does not fit into 16 bits")
        self._items.append(
            _ITEM.pack(
                padded_name,
                ext_byte,
                start,
                size,
                blocks,
                self._first_free_sector,
                self._first_free_track,
            )
        )

        first_free_block = file_block + blocks
        self._first_free_sector = first_free_block % SECTORS_PER_TRACK
        self._first_free_track = first_free_block // SECTORS_PER_TRACK + 1
        self._free_blocks = MAX_PAYLOAD_BLOCKS - first_free_block

    def _info_sector(self) -> bytes:
        info = bytearray(BYTES_PER_SECTOR)
        _INFO_FIELDS.pack_into(
            info,
            _INFO_FIELDS_OFFSET,
            self._first_free_sector,
            self._first_free_track,
            self._disk_type,
            len(self._items),
            self._free_blocks,
            TRDOS_ID,
        )
        return bytes(info)

    def serialize(self) -> bytes:
        catalog = b"".join(self._items).ljust(CATALOG_SIZE, b"\0")
        return catalog + self._info_sector() + bytes(_UNUSED_SECTORS) + bytes(self._payload)