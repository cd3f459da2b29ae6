"""Persistent list of favourite folders shown under Quick Access."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

CONFIG_FOLDER_VAR = "IMGUI_CONFIG_FOLDER"
CONFIG_FILE_VAR = "IMGUI_CONFIG_FILE"
DEFAULT_CONFIG_FOLDER = "filedialogs"
DEFAULT_CONFIG_FILE = "filedialogs.txt"

_DEFAULT_FOLDERS = ("Desktop", "Documents", "Downloads", "Music", "Pictures", "Videos")


def config_path(
    environ: Mapping[str, str] | None = None,
    home: str | os.PathLike[str] | None = None,
) -> Path:
    """Return where the favourites file lives.

    The folder and file names come from ``IMGUI_CONFIG_FOLDER`` and
    ``IMGUI_CONFIG_FILE``; empty or missing values fall back to the
    defaults. The file sits in ``<home>/.config/<folder>/<file>``.
    """
    env = os.environ if environ is None else environ
    if home is None:
        home = env.get("USERPROFILE" if os.name == "nt" else "HOME") or Path.home()
    folder = env.get(CONFIG_FOLDER_VAR) or DEFAULT_CONFIG_FOLDER
    filename = env.get(CONFIG_FILE_VAR) or DEFAULT_CONFIG_FILE
    return Path(home) / ".config" / folder / filename


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Make ``path`` canonical and drop trailing separators.

    A trailing separator is kept while the path holds only one separator,
    so roots such as ``/`` stay intact.
    """
    text = os.path.realpath(os.fspath(path))
    while text and text.count(os.sep) > 1 and text.endswith(os.sep):
        text = text[:-1]
    return text


def default_favorites(home: str | os.PathLike[str]) -> list[str]:
    """Return the folders offered as favourites before the user picks any."""
    home_text = os.fspath(home)
    favorites = [home_text.rstrip(os.sep) + os.sep]
    favorites.extend(os.path.join(home_text, name) for name in _DEFAULT_FOLDERS)
    return favorites


class FavoritesStore:
    """A text file holding one favourite path per line."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FavoritesStore({str(self.path)!r})"

    def load(self) -> list[str]:
        """Return the stored paths in file order; an absent file holds none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [line for line in text.splitlines() if line]

    def save(self, paths: Iterable[str | os.PathLike[str]]) -> list[str]:
        """Write the paths that still exist and return them.

        The containing folder is created when missing.
        """
        kept = [os.fspath(p) for p in paths if os.path.exists(os.fspath(p))]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            for entry in kept:
                handle.write(entry + "\n")
        return kept