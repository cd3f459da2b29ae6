import os
from pathlib import Path

from filedialog.favorites import (
    FavoritesStore,
    config_path,
    default_favorites,
    normalize_path,
)


def test_config_path_defaults(tmp_path):
    result = config_path({}, tmp_path)
    assert result == tmp_path / ".config" / "filedialogs" / "filedialogs.txt"


def test_config_path_from_environment(tmp_path):
    env = {"IMGUI_CONFIG_FOLDER": "mine", "IMGUI_CONFIG_FILE": "favs.txt"}
    assert config_path(env, tmp_path) == tmp_path / ".config" / "mine" / "favs.txt"


def test_config_path_empty_values_fall_back(tmp_path):
    env = {"IMGUI_CONFIG_FOLDER": "", "IMGUI_CONFIG_FILE": ""}
    assert config_path(env, tmp_path) == config_path({}, tmp_path)


def test_normalize_strips_trailing_separator(tmp_path):
    expected = os.path.realpath(tmp_path)
    assert normalize_path(str(tmp_path) + os.sep) == expected
    assert not normalize_path(str(tmp_path) + os.sep * 3).endswith(os.sep)


def test_normalize_is_idempotent(tmp_path):
    once = normalize_path(tmp_path / "a" / ".." / "b")
    assert normalize_path(once) == once
    assert once == os.path.realpath(tmp_path / "b")


def test_normalize_keeps_root():
    root = os.path.realpath(os.sep)
    assert normalize_path(root) == root


def test_default_favorites(tmp_path):
    favs = default_favorites(tmp_path)
    assert favs[0] == str(tmp_path) + os.sep
    assert len(favs) == 7
    assert all(Path(f).parent == tmp_path for f in favs[1:])
    assert len(set(favs)) == len(favs)


def test_load_missing_file(tmp_path):
    assert FavoritesStore(tmp_path / "nope.txt").load() == []


def test_save_load_round_trip(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    store = FavoritesStore(tmp_path / "cfg" / "favs.txt")
    written = store.save([first, str(second)])
    assert written == [str(first), str(second)]
    assert store.load() == [str(first), str(second)]


def test_save_drops_missing_paths(tmp_path):
    present = tmp_path / "here"
    present.mkdir()
    store = FavoritesStore(tmp_path / "favs.txt")
    store.save([tmp_path / "gone", present])
    assert store.load() == [str(present)]


def test_load_skips_blank_lines(tmp_path):
    file = tmp_path / "favs.txt"
    file.write_text("/a\n\n/b\n", encoding="utf-8")
    assert FavoritesStore(file).load() == ["/a", "/b"]