"""Back and forward navigation history of the dialog."""

from __future__ import annotations

import os
from pathlib import Path


class History:
    """Two stacks of directories, for going back and going forward."""

    def __init__(self) -> None:
        self._back: list[Path] = []
        self._forward: list[Path] = []

    def __repr__(self) -> str:
        return f"History(back={len(self._back)}, forward={len(self._forward)})"

    @property
    def can_go_back(self) -> bool:
        return bool(self._back)

    @property
    def can_go_forward(self) -> bool:
        return bool(self._forward)

    def visit(self, current: str | os.PathLike[str]) -> None:
        """Remember ``current`` before leaving it for another directory."""
        self._back.append(Path(current))

    def back(self, current: str | os.PathLike[str]) -> Path:
        """Return the previous directory; ``current`` becomes reachable forward."""
        if not self._back:
            raise IndexError("no earlier directory to go back to")
        target = self._back.pop()
        self._forward.append(Path(current))
        return target

    def forward(self, current: str | os.PathLike[str]) -> Path:
        """Return the next directory; ``current`` becomes reachable back."""
        if not self._forward:
            raise IndexError("no later directory to go forward to")
        target = self._forward.pop()
        self._back.append(Path(current))
        return target

    def clear(self) -> None:
        self._back.clear()
        self._forward.clear()