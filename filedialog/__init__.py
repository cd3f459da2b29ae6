"""File dialog state and logic, independent of any GUI toolkit."""

__version__ = "0.1.0"
__all__ = [
    "dialog",
    "entries",
    "favorites",
    "filters",
    "history",
    "parserutils",
    "selection",
    "sizes",
]