"""The file dialog's state: browsing, filtering, selecting and finishing."""

from __future__ import annotations

import contextlib
import os
import re
import shutil
import sys
from collections.abc import Callable, Mapping
from enum import IntEnum
from pathlib import Path

from .entries import FileData, FileTreeNode, SortColumn, is_hidden, read_entry, sort_entries
from .favorites import FavoritesStore, config_path, default_favorites, normalize_path
from .filters import FilterOption, parse_filter
from .history import History
from .selection import Selection

QUICK_ACCESS = "Quick Access"
THIS_PC = "This PC"

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 360
MIN_ZOOM = 1.0
MAX_ZOOM = 25.0

_INPUT_LIMIT = 1023
_SEARCH_LIMIT = 127
_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")


class DialogType(IntEnum):
    """What the dialog is asking the user for."""

    FILE = 0
    DIRECTORY = 1
    SAVE = 2


def _parse_dimension(value: str | None, default: int) -> int:
    if not value:
        return default
    match = _LEADING_NUMBER.match(value)
    return int(match.group(1)) if match else 0


def dialog_size(environ: Mapping[str, str] | None = None) -> tuple[int, int]:
    """Return the dialog's initial ``(width, height)``.

    ``IMGUI_DIALOG_WIDTH`` and ``IMGUI_DIALOG_HEIGHT`` override the
    defaults; a value without leading digits counts as 0.
    """
    env = os.environ if environ is None else environ
    return (
        _parse_dimension(env.get("IMGUI_DIALOG_WIDTH"), DEFAULT_WIDTH),
        _parse_dimension(env.get("IMGUI_DIALOG_HEIGHT"), DEFAULT_HEIGHT),
    )


def _ring_bell() -> None:
    sys.stdout.write("\a")
    sys.stdout.flush()


def _is_special(path: str | os.PathLike[str]) -> bool:
    return os.fspath(path) in (QUICK_ACCESS, THIS_PC)


def _root_folders() -> list[FileTreeNode]:
    if os.name == "nt":
        drives = (f"{chr(code)}:\\" for code in range(ord("A"), ord("Z") + 1))
        return [FileTreeNode(Path(d)) for d in drives if os.path.exists(d)]
    nodes = []
    try:
        with os.scandir("/") as it:
            for entry in it:
                path = Path("/") / entry.name
                if not is_hidden(path) and path.is_dir():
                    nodes.append(FileTreeNode(path))
    except OSError:
        pass
    return nodes


class FileDialog:
    """A file, directory or save dialog without any drawing of its own.

    A front end shows ``content``, ``tree`` and ``input_text`` and calls
    the methods below in response to the user.
    """

    def __init__(
        self,
        config_file: str | os.PathLike[str] | None = None,
        home: str | os.PathLike[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        env = os.environ if environ is None else environ
        if home is None:
            home = env.get("USERPROFILE" if os.name == "nt" else "HOME") or Path.home()
        self.home = Path(home)
        self.store = FavoritesStore(
            config_file if config_file is not None else config_path(env, self.home)
        )
        self.bell: Callable[[], None] = _ring_bell

        self.current_key = ""
        self.title = ""
        self.current_directory = Path()
        self.is_open = False
        self.type = DialogType.FILE
        self.input_text = ""
        self.search = ""
        self.zoom = MIN_ZOOM
        self.history = History()
        self.selection = Selection(False)
        self.selected_item: int | None = None
        self.filters: list[FilterOption] = []
        self.filter_selection = 0
        self.sort_column = SortColumn.NAME
        self.ascending = True
        self.content: list[FileData] = []
        self._result: list[Path] = []
        self._favorites: list[str] = []

        self.set_directory(Path.cwd(), False)

        self._quick_access = FileTreeNode(Path(QUICK_ACCESS), read=True)
        self.tree: list[FileTreeNode] = [self._quick_access]

        if not self.store.path.exists():
            self.store.path.parent.mkdir(parents=True, exist_ok=True)
            lines = default_favorites(self.home)
            self.store.path.write_text(
                "".join(line + "\n" for line in lines), encoding="utf-8"
            )
        for entry in self.store.load():
            self.add_favorite(entry)

        self.tree.append(FileTreeNode(Path(THIS_PC), read=True, children=_root_folders()))

    def __repr__(self) -> str:
        return f"FileDialog(key={self.current_key!r}, directory={str(self.current_directory)!r})"

    # results

    @property
    def has_result(self) -> bool:
        return bool(self._result)

    @property
    def result(self) -> Path:
        """The first chosen path."""
        if not self._result:
            raise LookupError("the dialog has no result")
        return self._result[0]

    @property
    def results(self) -> list[Path]:
        return list(self._result)

    @property
    def favorites(self) -> list[str]:
        return list(self._favorites)

    @property
    def needs_overwrite_confirmation(self) -> bool:
        """True while a save waits for the user to accept overwriting a file."""
        if not (self._result and self.is_open and self.input_text):
            return False
        if self.type is not DialogType.SAVE:
            return False
        target = self.current_directory / self.input_text
        return target.exists() and not target.is_dir()

    # opening and closing

    def _begin(self, key: str, title: str, kind: DialogType, multiselect: bool,
               filter: str, starting_file: str, starting_dir: str) -> bool:
        if self.current_key:
            return False
        self.current_key = key
        self.title = f"{title}###{key}"
        self.is_open = True
        self._result.clear()
        self.selection = Selection(multiselect)
        self.selected_item = None
        self.type = kind
        self.input_text = starting_file[:_INPUT_LIMIT]
        self.filters = parse_filter(filter)
        self.filter_selection = 0
        target = Path(starting_dir) if starting_dir else self.current_directory
        self.set_directory(target, False, False)
        return True

    def save(self, key: str, title: str, filter: str, starting_file: str = "",
             starting_dir: str = "") -> bool:
        """Start a save dialog; return False if another dialog is active."""
        return self._begin(key, title, DialogType.SAVE, False, filter,
                           starting_file, starting_dir)

    def open(self, key: str, title: str, filter: str, multiselect: bool = False,
             starting_file: str = "", starting_dir: str = "") -> bool:
        """Start an open dialog; an empty filter asks for a directory."""
        kind = DialogType.DIRECTORY if not filter else DialogType.FILE
        return self._begin(key, title, kind, multiselect, filter,
                           starting_file, starting_dir)

    def is_done(self, key: str) -> bool:
        """Return True once the dialog opened under ``key`` has closed."""
        return self.current_key == key and not self.is_open

    def cancel(self) -> None:
        """Close the dialog without choosing anything new."""
        self.is_open = False

    def close(self) -> None:
        """Store favourites and release the dialog for the next caller."""
        with contextlib.suppress(OSError):
            self.store.save(child.path for child in self._quick_access.children)
        self.current_key = ""
        self.history.clear()
        for root in self.tree:
            for item in root.children:
                item.children.clear()
                item.read = False

    # favourites

    def add_favorite(self, path: str | os.PathLike[str]) -> None:
        """Add an existing folder to Quick Access; duplicates are ignored."""
        text = normalize_path(path)
        if text in self._favorites or not os.path.exists(text):
            return
        self._favorites.append(text)
        self._quick_access.children.append(FileTreeNode(Path(text)))

    def remove_favorite(self, path: str | os.PathLike[str]) -> None:
        text = normalize_path(path)
        if text in self._favorites:
            self._favorites.remove(text)
        target = Path(text)
        for index, child in enumerate(self._quick_access.children):
            if child.path == target:
                del self._quick_access.children[index]
                break

    def set_zoom(self, zoom: float) -> None:
        """Set the icon zoom, kept between 1 and 25."""
        self.zoom = min(MAX_ZOOM, max(MIN_ZOOM, float(zoom)))

    # browsing

    def set_directory(self, path: str | os.PathLike[str], add_history: bool = True,
                      clear_filename: bool = True) -> None:
        """Show ``path`` and list its visible, matching entries."""
        text = os.fspath(path)
        if os.name == "nt" and len(text) == 2 and text[1] == ":":
            text += "\\"
        target = Path(text) if _is_special(text) else Path(normalize_path(text))

        is_same = self.current_directory == target
        if add_history and not is_same:
            self.history.visit(self.current_directory)
        self.current_directory = target

        self.content = []
        self.selected_item = None
        if self.type in (DialogType.DIRECTORY, DialogType.FILE) and clear_filename:
            self.input_text = ""
        self.selection.clear()
        if not is_same:
            self.search = ""

        if _is_special(target):
            for node in getattr(self, "tree", []):
                if node.path == target:
                    self.content.extend(read_entry(c.path) for c in node.children)
        else:
            self.content = list(self._list_directory(target))
        self.content = sort_entries(self.content, self.sort_column, self.ascending)

    def _list_directory(self, directory: Path):
        if not directory.exists():
            return
        option = (
            self.filters[self.filter_selection]
            if self.filter_selection < len(self.filters) else None
        )
        query = self.search.lower()
        try:
            with os.scandir(directory) as it:
                names = [entry.name for entry in it]
        except OSError:
            return
        for name in names:
            path = directory / name
            if is_hidden(path):
                continue
            info = read_entry(path)
            if not info.is_directory and self.type is DialogType.DIRECTORY:
                continue
            if query and query not in str(info.path).lower():
                continue
            if (not info.is_directory and self.type is not DialogType.DIRECTORY
                    and option is not None and not option.matches(info.path)):
                continue
            yield info

    def _refresh(self) -> None:
        self.set_directory(self.current_directory, False)

    def go_back(self) -> None:
        target = self.history.back(self.current_directory)
        self.set_directory(target, False)

    def go_forward(self) -> None:
        target = self.history.forward(self.current_directory)
        self.set_directory(target, False)

    def go_up(self) -> None:
        """Move to the parent folder, remembering the current one."""
        parent = self.current_directory.parent
        if parent != Path("."):
            self.set_directory(parent)

    def set_filter_selection(self, index: int) -> None:
        if not 0 <= index < len(self.filters):
            raise IndexError(f"no filter at index {index}")
        self.filter_selection = index
        self._refresh()

    def set_search(self, query: str) -> None:
        """Show only entries whose full path contains ``query``, ignoring case."""
        self.search = query[:_SEARCH_LIMIT]
        self._refresh()

    def sort(self, column: SortColumn | int = SortColumn.NAME, ascending: bool = True) -> None:
        self.sort_column = SortColumn(column)
        self.ascending = ascending
        self.content = sort_entries(self.content, self.sort_column, ascending)

    def select(self, path: str | os.PathLike[str], ctrl: bool = False) -> None:
        """Pick an entry and show the selection in the filename box."""
        self.input_text = self.selection.select(path, ctrl)[:_INPUT_LIMIT]

    # finishing

    def _absolute(self, path: Path) -> Path:
        return path if path.is_absolute() else self.current_directory / path

    def finalize(self, filename: str | None = None) -> bool:
        """Try to finish with ``filename`` (the filename box by default).

        Returns True and closes the dialog when the choice is acceptable;
        otherwise rings the bell and returns False.
        """
        if filename is None:
            filename = self.input_text
        kind = self.type
        must_exist = kind in (DialogType.DIRECTORY, DialogType.FILE)
        has_result = bool(filename) or kind is DialogType.DIRECTORY

        if has_result:
            if not self.selection.multiselect or len(self.selection) <= 1:
                candidates = [Path(filename)]
            else:
                candidates = list(self.selection)
            for candidate in candidates:
                self._result.append(self._absolute(candidate))
                if must_exist and not self._result[-1].exists():
                    self._result.clear()
                    return self._fail()

            if kind is DialogType.SAVE and self.filter_selection < len(self.filters):
                extensions = self.filters[self.filter_selection].extensions
                last = self._result[-1]
                if extensions and not last.suffix and last.name not in ("", ".", ".."):
                    ext = extensions[0]
                    self._result[-1] = last.with_suffix(ext if ext.startswith(".") else "." + ext)

        if self._result:
            last = self._result[-1]
            exists = last.exists()
            accepted = (
                (kind is DialogType.SAVE and not exists and not last.is_dir())
                or (kind is DialogType.SAVE and not filename)
                or (kind is DialogType.FILE and exists and not last.is_dir())
                or (kind is DialogType.DIRECTORY and exists and last.is_dir())
            )
            if accepted:
                self.is_open = False
                return True
        return self._fail()

    def _fail(self) -> bool:
        self.bell()
        if self._result and self.is_open and self.input_text and self.type is not DialogType.DIRECTORY:
            target = self.current_directory / self.input_text
            if target.is_dir():
                self.set_directory(target, False)
                self.input_text = ""
                self._result.clear()
        return False

    def confirm_overwrite(self, accept: bool) -> None:
        """Answer the overwrite question raised by a save onto an existing file."""
        if accept:
            self.is_open = False
        else:
            self._result.clear()

    # changing the file system

    def create_file(self, name: str) -> None:
        """Create an empty file in the current folder and refresh."""
        with contextlib.suppress(OSError):
            (self.current_directory / name).write_bytes(b"")
        self._refresh()

    def create_directory(self, name: str) -> None:
        with contextlib.suppress(OSError):
            (self.current_directory / name).mkdir()
        self._refresh()

    def delete(self, path: str | os.PathLike[str]) -> None:
        """Remove a file or a whole folder tree, then refresh."""
        target = Path(path)
        with contextlib.suppress(OSError):
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        self._refresh()