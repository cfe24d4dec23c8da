"""Command line tool that packs files into a TRD or SCL image."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from . import scl
from .fstools import load_file, save_file
from .scl import SclFileWriter
from .trd import TrdFileWriter
from .writer import FileWriter, WriterError

_WRITERS: dict[str, type[FileWriter]] = {"trd": TrdFileWriter, "scl": SclFileWriter}
_ADDRESS = re.compile(r"\s*([+-]?)(\d+)")

_USAGE = (
    "Make TRD/SCL file\n"
    "Syntax: {prog} output_file input_files\n"
    "Correct output file name: *.trd or *.scl\n"
    "Correct input file name: (0-7 chars).B\n"
    "Correct input file name: (0-7 chars).(load address in hex).(1 char)"
)


@dataclass(frozen=True)
class TrdosFileInfo:
    """Name, extension letter and start address of a TR-DOS file."""

    name: str
    ext: str
    start: int


def get_file_extension(path: str) -> str:
    """Return the text after the last dot of the last path component, or ''."""
    dot = path.rfind(".")
    if dot < 0 or "/" in path[dot:]:
        return ""
    return path[dot + 1:]


def _basename(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else ""
    return stripped.rsplit("/", 1)[-1]


def parse_trdos_file_info(path: str, default_start: int) -> TrdosFileInfo:
    """Derive the TR-DOS name and extension from a host file name."""
    base = _basename(path)
    dot = base.rfind(".")
    if dot < 0 or dot == len(base) - 1:
        raise ValueError(f"Incorrect file name {path}")
    name = base[:dot]
    if len(name.encode("utf-8", "surrogateescape")) > 8:
        raise ValueError(f"Incorrect file name {path}")
    return TrdosFileInfo(name=name, ext=base[dot + 1], start=default_start)


def parse_file_arg(arg: str) -> tuple[str, int]:
    """Split ``file[@address]`` into the file name and a decimal address."""
    file_name, sep, address = arg.partition("@")
    if not sep:
        return arg, 0
    match = _ADDRESS.fullmatch(address)
    if match is None:
        raise ValueError(f"Incorrect argument {arg}")
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-" or value == 0 or value > 0xFFFF:
        raise ValueError(f"Incorrect argument {arg}")
    return file_name, value


def make_image(dest: str, sources) -> int:
    """Pack ``sources`` into the image ``dest``; return the image size."""
    writer_class = _WRITERS.get(get_file_extension(dest).lower())
    if writer_class is None:
        raise ValueError(f"Unsupported file extension {dest}")
    writer = writer_class()

    print(f"Make file {dest}")
    for arg in sources:
        src, _address = parse_file_arg(arg)
        data = load_file(src, scl.MAX_FILE_SIZE)
        info = parse_trdos_file_info(src, len(data))
        try:
            writer.push_back(info.name, info.ext, info.start, data)
        except WriterError as exc:
            raise WriterError(f"Can't put file {src}") from exc
        print(f"+ {info.name}.{info.ext} start {info.start} size {len(data)} bytes")

    image = writer.serialize()
    save_file(dest, image)
    print(f"Total size {len(image)} bytes")
    return len(image)


def main(argv=None) -> int:
    """Run the command; return the process exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE.format(prog="trdscl"), file=sys.stderr)
        return 1
    try:
        make_image(args[0], args[1:])
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())