from pathlib import Path

from filedialog.selection import Selection, display_name


def test_display_name_uses_last_component():
    assert display_name("/home/user/notes.txt") == "notes.txt"


def test_display_name_of_root_is_whole_path():
    assert display_name("/") == "/"


def test_single_select_shows_filename():
    sel = Selection()
    assert sel.select("/data/a.txt") == "a.txt"
    assert sel.paths == [Path("/data/a.txt")]


def test_plain_click_replaces_selection():
    sel = Selection(multiselect=True)
    sel.select("/data/a.txt")
    sel.select("/data/b.txt")
    assert sel.paths == [Path("/data/b.txt")]
    assert sel.text() == "b.txt"


def test_ctrl_without_multiselect_replaces():
    sel = Selection(multiselect=False)
    sel.select("/data/a.txt")
    sel.select("/data/b.txt", ctrl=True)
    assert sel.paths == [Path("/data/b.txt")]


def test_ctrl_with_multiselect_adds_and_quotes():
    sel = Selection(multiselect=True)
    sel.select("/data/a.txt")
    text = sel.select("/data/b.txt", ctrl=True)
    assert text == '"a.txt", "b.txt"'
    assert len(sel) == 2


def test_ctrl_toggles_existing_path_off():
    sel = Selection(multiselect=True)
    sel.select("/data/a.txt")
    sel.select("/data/b.txt", ctrl=True)
    text = sel.select("/data/a.txt", ctrl=True)
    assert sel.paths == [Path("/data/b.txt")]
    assert text == "b.txt"


def test_toggling_everything_off_gives_empty_text():
    sel = Selection(multiselect=True)
    sel.select("/data/a.txt")
    assert sel.select("/data/a.txt", ctrl=True) == ""
    assert len(sel) == 0


def test_contains_and_clear():
    sel = Selection(multiselect=True)
    sel.select("/data/a.txt")
    assert "/data/a.txt" in sel
    assert Path("/data/b.txt") not in sel
    sel.clear()
    assert sel.paths == []
    assert sel.text() == ""


def test_order_is_pick_order():
    sel = Selection(multiselect=True)
    names = ["c.txt", "a.txt", "b.txt"]
    for name in names:
        sel.select(Path("/data") / name, ctrl=True)
    assert [p.name for p in sel] == names