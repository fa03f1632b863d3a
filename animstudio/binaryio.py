"""Length-prefixed binary string I/O.

Each string is stored as an unsigned 64-bit little-endian byte count followed
by the UTF-8 encoded bytes.
"""

from __future__ import annotations

import struct
from os import PathLike
from typing import BinaryIO, Callable, TypeVar, Union

_SIZE = struct.Struct("<Q")

T = TypeVar("T")
PathType = Union[str, "PathLike[str]"]


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError(f"expected {count} bytes, got {len(data)}")
    return data


def read_string(stream: BinaryIO) -> str:
    """Read one length-prefixed string; raise EOFError when the stream runs out."""
    (size,) = _SIZE.unpack(_read_exact(stream, _SIZE.size))
    return _read_exact(stream, size).decode("utf-8")


def write_string(stream: BinaryIO, value: str | bytes) -> None:
    """Write one length-prefixed string."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    stream.write(_SIZE.pack(len(data)))
    stream.write(data)


def read_file(filepath: PathType, callback: Callable[[BinaryIO], T]) -> T:
    """Open ``filepath`` for binary reading and pass the stream to ``callback``."""
    with open(filepath, "rb") as stream:
        return callback(stream)


def write_file(filepath: PathType, callback: Callable[[BinaryIO], T]) -> T:
    """Open ``filepath`` for binary writing (truncating) and pass the stream to ``callback``."""
    with open(filepath, "wb") as stream:
        return callback(stream)