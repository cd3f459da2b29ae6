# filedialog

A file dialog model that does not depend on any GUI toolkit. It holds the state and the
rules of an open-file, open-directory or save dialog. That covers the current directory,
back and forward history, extension filters, search, sorting, selection, favorites and
creating or deleting entries. Your UI code draws the dialog from this state and passes
the user's actions to a `FileDialog`.

## Installation

```
pip install filedialog
```

## Usage

```python
from filedialog.dialog import FileDialog
from filedialog.entries import SortColumn

dialog = FileDialog()
dialog.open(
    "ImageOpen",
    "Open an image",
    "Image Files (*.png;*.jpg){.png,.jpg},.*",
    multiselect=True,
)

# Draw dialog.content (FileData entries), dialog.tree (sidebar nodes) and
# dialog.input_text, then report what the user does:
dialog.set_search("holiday")
dialog.sort(SortColumn.DATE, ascending=False)
dialog.select(dialog.content[0].path, ctrl=False)
dialog.finalize()          # uses the filename box; returns True when accepted

if dialog.is_done("ImageOpen"):
    if dialog.has_result:
        for path in dialog.results:
            print(path)
    dialog.close()
```

`open` and `save` return `False` while another dialog is still active. Call `close()`
to release the dialog. `cancel()` closes it without adding a result. An empty filter
makes `open` ask for a directory.

### FileDialog

- Navigation: `set_directory(path, add_history=True, clear_filename=True)`, `go_back()`,
  `go_forward()` and `go_up()`. Going back or forward with nothing to return to raises
  `IndexError`. The special locations `"Quick Access"` and `"This PC"` list the favorites
  and the top-level folders (the drives on Windows).
- Listing: hidden entries (names starting with a dot, and on Windows entries with the
  hidden or system attribute) are skipped. Directory dialogs list only folders. Files
  must match the selected filter. `set_filter_selection(index)` changes the filter and
  `set_search(query)` keeps entries whose full path contains the query, ignoring case.
- Finishing: `finalize(filename=None)` accepts an existing file for open dialogs and an
  existing folder for directory dialogs. Save dialogs take a path that does not exist
  yet and add the first extension of the selected filter when the name has none. When
  the choice is rejected, `bell` is called. It defaults to writing `\a` to stdout and
  can be replaced. After a save onto an existing file, `needs_overwrite_confirmation`
  is true, and `confirm_overwrite(accept)` answers it.
- Results: `has_result`, `result` (raises `LookupError` when empty) and `results`.
- Favorites: `add_favorite(path)`, `remove_favorite(path)` and `favorites`. Only folders
  that exist are added. `close()` writes the favorites that still exist back to the
  favorites file.
- Other: `set_zoom(zoom)` clamps the zoom to 1–25. `create_file(name)`,
  `create_directory(name)` and `delete(path)` change the current folder and refresh it.

`FileDialog(config_file=None, home=None, environ=None)` creates the favorites file when
it is missing and fills it with the home folder and its Desktop, Documents, Downloads,
Music, Pictures and Videos folders.

## Building blocks

- `filedialog.filters`: `parse_filter(spec)` turns `Name{.ext1,.ext2},Other{.ext}` into
  a list of `FilterOption`. `FilterOption.matches(path)` checks a path against one
  option. A bare `.*`, `*.*` or `*` becomes an "All Files" option that matches everything.
- `filedialog.selection`: `Selection` handles single selection and ctrl-toggling in
  multiselect mode. `Selection.text()` gives the filename-box text, and
  `display_name(path)` gives an entry's shown name.
- `filedialog.history`: `History` holds the back and forward stacks (`visit`, `back`,
  `forward`, `clear`).
- `filedialog.entries`: `read_entry`, `is_hidden`, `FileData`, `FileTreeNode` (with
  `load_children()` for lazily read subfolders), `SortColumn` and `sort_entries`, which
  puts directories first.
- `filedialog.favorites`: `FavoritesStore` (`load`, `save`), `config_path`,
  `normalize_path` and `default_favorites`. The file defaults to
  `~/.config/filedialogs/filedialogs.txt`. `IMGUI_CONFIG_FOLDER` and `IMGUI_CONFIG_FILE`
  change the folder and file names.
- `filedialog.sizes`: `human_readable(size)` formats byte counts such as `100 B` or
  `1.5 KB`.
- `filedialog.parserutils`: `TextCursor` scans tokens, integers and decimal numbers in
  text, and raises `ValueError` on malformed input. `is_integral_digit` is also provided.

`filedialog.dialog.dialog_size(environ=None)` returns the initial dialog size. It is
640×360 unless `IMGUI_DIALOG_WIDTH` or `IMGUI_DIALOG_HEIGHT` is set.

## What this package does not do

It draws nothing and has no window, widgets or command. It does not supply file or
folder icons, look up system icon themes, or load image previews. A front end has to
provide those itself.

## Running the tests

```
pip install "filedialog[test]"
pytest
```