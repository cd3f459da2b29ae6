import os
from pathlib import Path

import pytest

from filedialog.entries import (
    FileData,
    FileTreeNode,
    SortColumn,
    is_hidden,
    read_entry,
    sort_entries,
)


def test_read_entry_file(tmp_path):
    f = tmp_path / "notes.txt"
    f.write_bytes(b"hello world")
    data = read_entry(f)
    assert data.path == f
    assert data.is_directory is False
    assert data.size == len(b"hello world")
    assert data.date_modified == os.stat(f).st_ctime


def test_read_entry_directory(tmp_path):
    d = tmp_path / "sub"
    d.mkdir()
    data = read_entry(str(d))
    assert data.path == d
    assert data.is_directory is True
    assert data.size is None


def test_read_entry_missing(tmp_path):
    data = read_entry(tmp_path / "missing")
    assert data.is_directory is False
    assert data.size is None
    assert data.date_modified == 0.0


@pytest.mark.parametrize(
    "name, hidden",
    [(".git", True), (".bashrc", True), ("readme.md", False), ("folder", False)],
)
def test_is_hidden_names(tmp_path, name, hidden):
    assert is_hidden(tmp_path / name) is hidden


def test_is_hidden_root_has_no_name():
    assert is_hidden(Path(Path.cwd().anchor)) is True


def test_load_children_lists_visible_directories(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / ".hidden").mkdir()
    (tmp_path / "file.txt").write_text("x")
    node = FileTreeNode(tmp_path)
    children = node.load_children()
    assert sorted(c.path.name for c in children) == ["a", "b"]
    assert node.read is True
    assert all(c.read is False for c in children)


def test_load_children_reads_once(tmp_path):
    (tmp_path / "a").mkdir()
    node = FileTreeNode(tmp_path)
    node.load_children()
    (tmp_path / "later").mkdir()
    assert [c.path.name for c in node.load_children()] == ["a"]


def test_load_children_missing_directory(tmp_path):
    node = FileTreeNode(tmp_path / "nope")
    assert node.load_children() == []
    assert node.read is True


def test_label_uses_stem_or_path():
    assert FileTreeNode(Path("/home/user/docs.old")).label == "docs"
    root = Path(Path.cwd().anchor)
    assert FileTreeNode(root).label == str(root)


def _entry(name, is_dir=False, size=None, date=0.0):
    return FileData(Path(name), is_dir, size, date)


def test_sort_puts_directories_first_by_name():
    entries = [
        _entry("b.txt", size=1),
        _entry("Zdir", is_dir=True),
        _entry("A.txt", size=2),
        _entry("adir", is_dir=True),
    ]
    result = sort_entries(entries, SortColumn.NAME, True)
    assert [e.path.name for e in result] == ["adir", "Zdir", "A.txt", "b.txt"]


def test_sort_descending_reverses_each_part():
    entries = [
        _entry("b.txt", size=1),
        _entry("Zdir", is_dir=True),
        _entry("A.txt", size=2),
        _entry("adir", is_dir=True),
    ]
    result = sort_entries(entries, SortColumn.NAME, False)
    assert [e.path.name for e in result] == ["Zdir", "adir", "b.txt", "A.txt"]


def test_sort_by_size():
    entries = [_entry("x", size=30), _entry("y", size=10), _entry("z", size=20)]
    sizes = [e.size for e in sort_entries(entries, SortColumn.SIZE, True)]
    assert sizes == sorted(sizes)
    desc = [e.size for e in sort_entries(entries, 2, False)]
    assert desc == sorted(desc, reverse=True)


def test_sort_by_date():
    entries = [_entry("x", date=5.0), _entry("y", date=1.0), _entry("z", date=3.0)]
    dates = [e.date_modified for e in sort_entries(entries, SortColumn.DATE, True)]
    assert dates == sorted(dates)


def test_sort_keeps_all_entries():
    entries = [_entry("x", size=1), _entry("d", is_dir=True), _entry("y", size=2)]
    result = sort_entries(entries, SortColumn.NAME, True)
    assert len(result) == len(entries)
    assert {e.path for e in result} == {e.path for e in entries}


def test_sort_rejects_unknown_column():
    with pytest.raises(ValueError):
        sort_entries([_entry("x", size=1)], 7, True)