"""Project metadata persistence and a most-recently-used project list."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .binaryio import read_file, read_string, write_file, write_string


@dataclass
class RecentProject:
    """An entry in the recent projects list."""

    id: str = ""
    name: str = ""
    filepath: str = ""


@dataclass
class ProjectData:
    """The currently open project."""

    id: str = ""
    name: str = ""
    filepath: str = ""


class ProjectManager:
    """Saves and loads the current project and keeps the recent projects file."""

    def __init__(
        self,
        file_extension: str,
        recent_file_name: str = "recent",
        max_recent_projects: int = 5,
        directory: Union[str, "PathLike[str]", None] = None,
    ) -> None:
        self.is_running = True
        self.data = ProjectData()
        self._file_extension = file_extension
        self.recent_file_name = recent_file_name
        self.max_recent_projects = max_recent_projects
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self.recent_projects: list[RecentProject] = []

        try:
            self.recent_projects = read_file(self._recent_path, self._read_recent)
        except FileNotFoundError:
            pass

    @property
    def _recent_path(self) -> Path:
        return self.directory / self.recent_file_name

    def _read_recent(self, stream: BinaryIO) -> list[RecentProject]:
        projects = []
        for _ in range(self.max_recent_projects):
            try:
                projects.append(
                    RecentProject(read_string(stream), read_string(stream), read_string(stream))
                )
            except EOFError:
                break
        return projects

    def is_ready(self) -> bool:
        """Return whether the project has both a file path and a name."""
        return bool(self.data.filepath) and bool(self.data.name)

    def serialize(self, generate_uid: bool = False) -> None:
        """Write the project to its file path, first giving it a new id if asked."""
        if generate_uid:
            self.data.id = self.generate_uid()

        def _write(stream: BinaryIO) -> None:
            write_string(stream, self.data.id)
            write_string(stream, self.data.name)
            write_string(stream, self.data.filepath)

        write_file(self.data.filepath, _write)

    def deserialize(self, filepath: Union[str, "PathLike[str]"]) -> None:
        """Load the project stored at ``filepath``."""

        def _read(stream: BinaryIO) -> ProjectData:
            return ProjectData(read_string(stream), read_string(stream), read_string(stream))

        self.data = read_file(filepath, _read)

    @property
    def file_extension(self) -> str:
        """The extension used for project files."""
        return self._file_extension

    def generate_uid(self) -> str:
        """Return a millisecond timestamp and a six-digit random number joined by ``_``."""
        timestamp = time.time_ns() // 1_000_000
        return f"{timestamp}_{random.randint(100000, 999999)}"

    def update_recent_projects(self) -> None:
        """Move the current project to the front of the recent list and save the list."""
        self.recent_projects = [p for p in self.recent_projects if p.id != self.data.id]
        self.recent_projects.insert(
            0, RecentProject(self.data.id, self.data.name, self.data.filepath)
        )
        del self.recent_projects[self.max_recent_projects:]

        def _write(stream: BinaryIO) -> None:
            for recent in self.recent_projects:
                write_string(stream, recent.id)
                write_string(stream, recent.name)
                write_string(stream, recent.filepath)

        write_file(self._recent_path, _write)

    def quit(self) -> None:
        """Mark the manager as no longer running."""
        self.is_running = False


def recent_projects_in(directory: Optional[Path], file_name: str = "recent") -> list[RecentProject]:
    """Return the recent projects stored in ``directory`` (the working directory by default)."""
    return ProjectManager("", file_name, directory=directory).recent_projects