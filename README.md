# trdscl

Build ZX Spectrum disk images from ordinary files. Two output formats are
supported:

- **TRD**: a full 640 KiB TR-DOS disk image (160 tracks of 16 sectors,
  marked as an 80-track double-sided disk).
- **SCL**: a compact "SINCLAIR" archive holding the catalogue, the file
  bodies padded to whole sectors, and a 32-bit checksum.

## Installation

```
pip install .
```

## Command line

```
maketrd OUTPUT INPUT...
```

The output file name must end in `.trd` or `.scl` (in any letter case); the
extension picks the format. Each input is a path whose base name gives the
TR-DOS file name:

- the part before the last dot is the name, at most 8 bytes long,
- the first character after the last dot is the one-letter TR-DOS extension
  (for example `B` for BASIC or `C` for code).

A base name without a dot, or ending in a dot, is rejected.

An input may be written as `path@address`, where the address must be a
decimal number from 1 to 65535. The address is checked but not stored: the
start field written to the catalogue is always the size of the file in
bytes.

Each file must be between 1 and 65280 bytes (255 sectors of 256 bytes). An
image holds at most 128 files in TRD and 127 in SCL; a TRD image also stops
accepting files when the disk is full.

The command prints every file it adds and the total size of the image. It
exits with status 1 (after printing a usage message) when called without
arguments, with status 2 when the image cannot be built, and 0 otherwise.

Example:

```
maketrd game.trd boot.B loader.C
```

The same command is available as `python -m trdscl.cli`.

## Library

```python
from trdscl.scl import SclFileWriter
from trdscl.trd import TrdFileWriter

writer = SclFileWriter()
writer.push_back("hello", "C", 32768, b"\x00" * 300)
image = writer.serialize()
```

Both writers derive from `trdscl.writer.FileWriter` and offer
`push_back(name, ext, start, data)` and `serialize()`, which returns the
image as `bytes`. `push_back` raises `trdscl.writer.WriterError` (a
`ValueError`) when a file does not fit: the catalogue is full, the data is
empty or too large, the name is longer than eight bytes, the extension is
longer than one byte, the start address does not fit into 16 bits, or the
TRD disk is full. Names shorter than eight bytes are padded with spaces
(`trdscl.writer.pad_name`).

Other helpers:

- `trdscl.scl.checksum(data)`: the 32-bit byte sum used by SCL images.
- `trdscl.trd.DiskType`: the TR-DOS disk geometry codes.
- `trdscl.fstools.load_file(path, max_size)` and
  `trdscl.fstools.save_file(path, data)`: whole-file reading with a size
  limit and writing.
- `trdscl.cli.make_image(dest, sources)`: does the whole job of the command
  from Python and returns the size of the image written.
- `trdscl.cli.parse_file_arg`, `trdscl.cli.parse_trdos_file_info` and
  `trdscl.cli.get_file_extension`: the argument and file-name parsing used
  by the command.

## What it does not do

The package only creates new images. It cannot open, list, extract from or
modify an existing TRD or SCL image, and it sets no disk label and records
no deleted files.