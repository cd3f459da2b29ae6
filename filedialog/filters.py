"""File-type filters for the dialog's extension selector.

A filter spec lists named groups of extensions, e.g.::

    Image Files (*.png;*.jpg){.png,.jpg},.*

Each ``name{ext,ext,...}`` becomes one option. A bare ``*.*``, ``.*`` or
``*`` stands for "all files" and matches everything.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath

ALL_FILES = "All Files"

_WILDCARDS = frozenset({"*.*", ".*", "*"})


def _extension(path: str | os.PathLike[str]) -> str:
    """Return the extension of the last path component, dot included."""
    name = PurePath(path).name
    if name in ("", ".", ".."):
        return ""
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


@dataclass(frozen=True)
class FilterOption:
    """One entry of the extension selector."""

    name: str
    extensions: tuple[str, ...] = ()

    def matches(self, path: str | os.PathLike[str]) -> bool:
        """Return True if ``path`` passes this filter.

        An option without extensions lets every file through; otherwise
        the path's extension must be one of them, compared exactly.
        """
        if not self.extensions:
            return True
        return _extension(path) in self.extensions


def _named(name: str) -> FilterOption:
    if name in _WILDCARDS:
        return FilterOption(ALL_FILES)
    return FilterOption(name)


def parse_filter(spec: str) -> list[FilterOption]:
    """Split a filter spec into its options, in the order given."""
    options: list[FilterOption] = []
    if not spec:
        return options

    last_split = 0
    last_ext = 0
    in_ext_list = False
    current_name = ""
    current_is_wildcard = False
    exts: list[str] = []
    trailing_opened_list = False

    for i, ch in enumerate(spec):
        if ch == ",":
            if not in_ext_list:
                last_split = i + 1
                trailing_opened_list = False
            else:
                exts.append(spec[last_ext:i])
                last_ext = i + 1
        elif ch == "{":
            current_name = spec[last_split:i]
            current_is_wildcard = current_name in _WILDCARDS
            in_ext_list = True
            trailing_opened_list = True
            last_ext = i + 1
        elif ch == "}":
            exts.append(spec[last_ext:i])
            if current_is_wildcard:
                options.append(FilterOption(ALL_FILES))
            else:
                options.append(FilterOption(current_name, tuple(exts)))
            exts = []
            in_ext_list = False

    if last_split != 0 and not trailing_opened_list:
        name = spec[last_split:]
        if name:
            options.append(_named(name))

    return options