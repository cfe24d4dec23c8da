import struct

import pytest

from trdscl.trd import (
    BYTES_PER_SECTOR,
    CATALOG_SIZE,
    INFO_OFFSET,
    MAX_FILE_SIZE,
    MAX_FILES,
    MAX_PAYLOAD_BLOCKS,
    SECTORS_PER_TRACK,
    DiskType,
    TrdFileWriter,
)
from trdscl.writer import WriterError

PAYLOAD_OFFSET = SECTORS_PER_TRACK * BYTES_PER_SECTOR


def _info(image):
    return struct.unpack("<BBBBHB", image[INFO_OFFSET + 225:INFO_OFFSET + 232])


def _item(image, index):
    return struct.unpack("<8ssHHBBB", image[index * 16:(index + 1) * 16])


def test_empty_disk_layout():
    image = TrdFileWriter().serialize()
    assert len(image) == 655360
    sector, track, disk_type, count, free, trdos_id = _info(image)
    assert (sector, track, count) == (0, 1, 0)
    assert disk_type == DiskType.DOUBLE_SIDED_80 == 0x16
    assert free == MAX_PAYLOAD_BLOCKS
    assert trdos_id == 0x10
    assert image[:CATALOG_SIZE] == bytes(CATALOG_SIZE)


def test_disk_type_kept_after_adding_files():
    writer = TrdFileWriter()
    writer.push_back("A", "C", 0, b"1")
    image = writer.serialize()
    assert _info(image)[2] == DiskType.DOUBLE_SIDED_80
    assert image[INFO_OFFSET] == 0


def test_single_file():
    writer = TrdFileWriter()
    data = b"z" * (BYTES_PER_SECTOR + 44)
    writer.push_back("BOOT", "B", len(data), data)
    image = writer.serialize()
    assert len(image) == 655360
    name, ext, start, size, sectors, sector, track = _item(image, 0)
    assert name == b"BOOT    "
    assert ext == b"B"
    assert start == len(data)
    assert size == len(data)
    assert sectors == 2
    assert (sector, track) == (0, 1)
    assert image[PAYLOAD_OFFSET:PAYLOAD_OFFSET + len(data)] == data
    info = _info(image)
    assert info[0] == 2
    assert info[1] == 1
    assert info[3] == 1
    assert info[4] == MAX_PAYLOAD_BLOCKS - 2


def test_second_file_follows_first():
    writer = TrdFileWriter()
    writer.push_back("A", "C", 0, b"1")
    writer.push_back("B", "C", 0, b"2")
    image = writer.serialize()
    assert _item(image, 1)[5:] == (1, 1)
    assert image[PAYLOAD_OFFSET + BYTES_PER_SECTOR] == ord("2")


def test_track_boundary():
    writer = TrdFileWriter()
    writer.push_back("A", "C", 0, bytes(SECTORS_PER_TRACK * BYTES_PER_SECTOR))
    writer.push_back("B", "C", 0, b"x")
    image = writer.serialize()
    assert _item(image, 1)[5:] == (0, 2)
    sector, track = _info(image)[:2]
    assert (sector, track) == (1, 2)


def test_file_limit():
    writer = TrdFileWriter()
    for _ in range(MAX_FILES):
        writer.push_back("F", "B", 0, b"1")
    with pytest.raises(WriterError):
        writer.push_back("F", "B", 0, b"1")
    assert _info(writer.serialize())[3] == MAX_FILES


def test_disk_full():
    writer = TrdFileWriter()
    full_files = MAX_PAYLOAD_BLOCKS // 255
    for _ in range(full_files):
        writer.push_back("BIG", "C", 0, bytes(MAX_FILE_SIZE))
    with pytest.raises(WriterError):
        writer.push_back("BIG", "C", 0, bytes(MAX_FILE_SIZE))
    free = _info(writer.serialize())[4]
    assert free == MAX_PAYLOAD_BLOCKS - full_files * 255


def test_empty_and_oversized_rejected():
    writer = TrdFileWriter()
    with pytest.raises(WriterError):
        writer.push_back("A", "B", 0, b"")
    with pytest.raises(WriterError):
        writer.push_back("A", "B", 0, bytes(MAX_FILE_SIZE + 1))


def test_long_name_rejected_without_adding_entry():
    writer = TrdFileWriter()
    with pytest.raises(WriterError):
        writer.push_back("ABCDEFGHI", "B", 0, b"1")
    image = writer.serialize()
    assert _info(image)[3] == 0
    assert image[:CATALOG_SIZE] == bytes(CATALOG_SIZE)