"""Reading and writing whole files."""

from __future__ import annotations

import os


def load_file(path, max_size: int) -> bytes:
    """Read the whole file at ``path``; refuse files larger than ``max_size``."""
    with open(path, "rb") as stream:
        size = os.fstat(stream.fileno()).st_size
        if size > max_size:
            raise ValueError(
                f"Too big file {path}, current size {size}, max size {max_size}"
            )
        data = stream.read()
    if len(data) != size:
        raise OSError(f"Can't read file {path}")
    return data


def save_file(path, data: bytes) -> None:
    """Write ``data`` to ``path``, removing the file if writing fails."""
    with open(path, "wb") as stream:
        try:
            stream.write(data)
            stream.flush()
        except OSError as exc:
            stream.close()
            os.unlink(path)
            raise OSError(f"Can't write file {path}") from exc