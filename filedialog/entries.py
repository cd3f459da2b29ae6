"""Directory entries shown by the dialog and the sidebar folder tree."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterable


class SortColumn(IntEnum):
    """Columns the content view can be sorted by."""

    NAME = 0
    DATE = 1
    SIZE = 2


@dataclass
class FileData:
    """One entry of the content view.

    ``size`` is None for directories and for files whose size cannot be
    read. ``date_modified`` is the status-change time as a POSIX timestamp.
    """

    path: Path
    is_directory: bool
    size: int | None
    date_modified: float

    def __post_init__(self) -> None:
        self.path = Path(self.path)


def read_entry(path: str | os.PathLike[str]) -> FileData:
    """Describe ``path`` as the content view lists it."""
    p = Path(path)
    is_directory = p.is_dir()
    size: int | None = None
    date_modified = 0.0
    try:
        info = p.stat()
    except OSError:
        info = None
    if info is not None:
        date_modified = info.st_ctime
        if not is_directory:
            size = info.st_size
    return FileData(p, is_directory, size, date_modified)


def is_hidden(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` should not be listed.

    Names starting with a dot, and paths without a name, are hidden. On
    Windows, entries with the hidden or system attribute are hidden too.
    """
    p = Path(path)
    name = p.name
    if not name or name.startswith("."):
        return True
    if os.name == "nt":
        try:
            attributes = getattr(p.stat(), "st_file_attributes", 0)
        except OSError:
            return False
        mask = stat.FILE_ATTRIBUTE_HIDDEN | stat.FILE_ATTRIBUTE_SYSTEM
        return bool(attributes & mask)
    return False


@dataclass
class FileTreeNode:
    """A folder in the sidebar tree whose subfolders are read on demand."""

    path: Path
    read: bool = False
    children: list[FileTreeNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def label(self) -> str:
        """The text shown for this node: the stem, or the whole path for roots."""
        return self.path.stem or str(self.path)

    def load_children(self) -> list[FileTreeNode]:
        """Read the visible subfolders once and return the child nodes."""
        if not self.read:
            if self.path.exists():
                try:
                    with os.scandir(self.path) as it:
                        for entry in it:
                            child = self.path / entry.name
                            if is_hidden(child):
                                continue
                            if child.is_dir():
                                self.children.append(FileTreeNode(child))
                except OSError:
                    pass
            self.read = True
        return self.children


def _sort_key(column: SortColumn):
    if column is SortColumn.NAME:
        return lambda data: str(data.path).lower()
    if column is SortColumn.DATE:
        return lambda data: data.date_modified
    return lambda data: -1 if data.size is None else data.size


def sort_entries(
    entries: Iterable[FileData],
    column: SortColumn | int = SortColumn.NAME,
    ascending: bool = True,
) -> list[FileData]:
    """Return the entries with directories first, each part sorted by ``column``."""
    column = SortColumn(column)
    items = list(entries)
    key = _sort_key(column)
    directories = sorted(
        (e for e in items if e.is_directory), key=key, reverse=not ascending
    )
    files = sorted(
        (e for e in items if not e.is_directory), key=key, reverse=not ascending
    )
    return directories + files