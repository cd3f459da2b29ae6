"""The set of entries picked in the dialog and its textbox rendering."""

from __future__ import annotations

import os
from pathlib import Path


def display_name(path: str | os.PathLike[str]) -> str:
    """Return the last component of ``path``, or the whole path for roots."""
    p = Path(path)
    return p.name or str(p)


class Selection:
    """Paths chosen by the user, in the order they were picked."""

    def __init__(self, multiselect: bool = False) -> None:
        self.multiselect = multiselect
        self.paths: list[Path] = []

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, (str, os.PathLike)):
            return Path(path) in self.paths
        return False

    def select(self, path: str | os.PathLike[str], ctrl: bool = False) -> str:
        """Pick ``path`` and return the new textbox text.

        Without ctrl, or when multiselect is off, the selection becomes
        just ``path``. With ctrl in multiselect mode, ``path`` is toggled.
        """
        p = Path(path)
        if ctrl and self.multiselect:
            if p in self.paths:
                self.paths.remove(p)
            else:
                self.paths.append(p)
        else:
            self.paths = [p]
        return self.text()

    def clear(self) -> None:
        self.paths.clear()

    def text(self) -> str:
        """Render the selection as the dialog's filename textbox shows it."""
        if len(self.paths) == 1:
            return display_name(self.paths[0])
        return ", ".join(f'"{display_name(p)}"' for p in self.paths)