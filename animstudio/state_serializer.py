"""Persisting named string lists and string maps to a binary file.

File layout (all counts are unsigned 64-bit little-endian, strings are
length-prefixed UTF-8): the number of lists, then each list's key, item count
and items; then the number of maps, then each map's key, entry count and
key/value pairs. Keys are written in sorted order.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .binaryio import read_string, write_string

_COUNT = struct.Struct("<Q")


def _write_count(stream: BinaryIO, count: int) -> None:
    stream.write(_COUNT.pack(count))


def _read_count(stream: BinaryIO) -> int:
    data = stream.read(_COUNT.size)
    if len(data) != _COUNT.size:
        raise EOFError("truncated state file")
    return _COUNT.unpack(data)[0]


@dataclass
class SaveFile:
    """Where state is stored: ``directory / (name + extension)``."""

    name: str = ""
    extension: str = ""
    directory: str = ""

    @property
    def path(self) -> Path:
        return Path(self.directory) / (self.name + self.extension)


class StateSerializer:
    """Holds keyed string lists and string maps and saves or loads them."""

    def __init__(self, save_file: Optional[SaveFile] = None) -> None:
        self.save_file = save_file if save_file is not None else SaveFile()
        self._maps: dict[str, dict[str, str]] = {}
        self._vectors: dict[str, list[str]] = {}

    def set_save_file_name(self, name: str) -> None:
        self.save_file.name = name

    def set_save_file_extension(self, extension: str) -> None:
        """Set the extension; a leading dot is added."""
        self.save_file.extension = "." + extension

    def set_save_file_directory(self, directory: str) -> None:
        self.save_file.directory = directory

    def map(self, key: str) -> dict[str, str]:
        """Return the mutable map stored under ``key``, creating it if needed."""
        return self._maps.setdefault(key, {})

    def vector(self, key: str) -> list[str]:
        """Return the mutable list stored under ``key``, creating it if needed."""
        return self._vectors.setdefault(key, [])

    def write(self, save_file: Optional[SaveFile] = None) -> Path:
        """Write all state to ``save_file`` (the configured one by default); return the path."""
        path = (save_file or self.save_file).path
        with open(path, "wb") as out:
            _write_count(out, len(self._vectors))
            for key in sorted(self._vectors):
                write_string(out, key)
                items = self._vectors[key]
                _write_count(out, len(items))
                for item in items:
                    write_string(out, item)

            _write_count(out, len(self._maps))
            for key in sorted(self._maps):
                write_string(out, key)
                entries = self._maps[key]
                _write_count(out, len(entries))
                for entry_key in sorted(entries):
                    write_string(out, entry_key)
                    write_string(out, entries[entry_key])
        return path

    def read(self, save_file: Optional[SaveFile] = None) -> bool:
        """Load state from ``save_file``, replacing same-named entries.

        Returns False when the file is missing or empty. A file cut short
        after its first count raises EOFError.
        """
        path = (save_file or self.save_file).path
        try:
            stream = open(path, "rb")
        except OSError:
            return False
        with stream:
            try:
                vector_count = _read_count(stream)
            except EOFError:
                return False
            for _ in range(vector_count):
                key = read_string(stream)
                self._vectors[key] = [read_string(stream) for _ in range(_read_count(stream))]

            for _ in range(_read_count(stream)):
                key = read_string(stream)
                entries: dict[str, str] = {}
                for _ in range(_read_count(stream)):
                    entry_key = read_string(stream)
                    entries[entry_key] = read_string(stream)
                self._maps[key] = entries
        return True