# zerolaunch

Building blocks for a keyboard-driven program launcher. The package holds the
launcher's settings and saves them as versioned JSON. It converts Chinese
characters in program names into pinyin. It also walks folders to find the
files a launcher would index.

## Configuration

Each settings class is a dataclass with the launcher's defaults. Each one also
has a `Partial...` counterpart in which any field may be `None`. Call
`update(partial)` to apply the fields that are present. Call `to_partial()` to
read every setting back. The partial classes convert to and from plain
JSON-ready mappings with `to_dict()` and `from_dict()`. `from_dict()` checks
the type and range of each value, raises `TypeError` or `ValueError` when a
value is wrong, and ignores unknown keys.

- `zerolaunch.app_config`: `AppConfig` / `PartialAppConfig` hold the placeholder
  text, the number of results, start-up options, the window position and
  similar options. Any `update()` sets `is_initial` to `True`.
- `zerolaunch.window_state`: `WindowState` / `PartialWindowState` hold the
  scale factor, size and origin of the screen.
- `zerolaunch.shortcut_config`: `Shortcut`, `ShortcutConfig` and
  `PartialShortcutConfig`. The default shortcuts are Alt+Space, Ctrl+K,
  Ctrl+J, Ctrl+H and Ctrl+L. `shortcut_key_code()` maps a key name to a key
  code, so `"a"` becomes `"KeyA"` and `"7"` becomes `"Digit7"`. The accepted
  names are single ASCII letters and digits, `Space`, `Tab` and `CapsLock`.
  Any other name raises `ValueError`.
- `zerolaunch.image_loader_config`: `ImageLoaderConfig` /
  `PartialImageLoaderConfig` hold two switches, `enable_icon_cache` and
  `enable_online`.
- `zerolaunch.loader_config`: `ProgramLoaderConfig` /
  `PartialProgramLoaderConfig` and `DirectoryConfig` describe what to scan:
  - folders with their depth, patterns and excluded keywords
  - program biases
  - indexed web pages
  - custom commands
  - forbidden paths

  `DirectoryConfig.with_defaults(root, depth)` looks for `*.url`, `*.exe` and
  `*.lnk` files. `default_target_paths()` builds folder entries from the
  `PROGRAMDATA`, `APPDATA` and `USERPROFILE` environment variables.
- `zerolaunch.launcher_config`: `ProgramLauncherConfig` /
  `PartialProgramLauncherConfig` store launch statistics: per-day counts with
  the newest day first, total counts, the last update date and the latest
  launch times. `current_date()` and `is_date_current()` work with the stored
  date format (`YYYY-MM-DD`).
- `zerolaunch.program_manager_config`: `ProgramManagerConfig` groups the
  launcher, loader and icon loader settings.
- `zerolaunch.runtime_config`: `RuntimeConfig` / `PartialRuntimeConfig` hold
  all of the above. `RuntimeConfig.to_partial()` leaves out the window state,
  because the window state is not saved.

### Saving and loading

`save_local_config()` returns JSON text tagged with version
`LOCAL_CONFIG_VERSION` (`"2"`). `load_local_config()` reads that text back.
If the text cannot be read, is malformed, or carries another version, it
returns the defaults.

```python
from zerolaunch.app_config import PartialAppConfig
from zerolaunch.runtime_config import (
    PartialRuntimeConfig, RuntimeConfig, load_local_config, save_local_config,
)

config = RuntimeConfig()
config.update(PartialRuntimeConfig(app_config=PartialAppConfig(search_result_count=6)))
text = save_local_config(config.to_partial())
restored = load_local_config(text)
assert restored.app_config.search_result_count == 6
```

## Pinyin

`zerolaunch.pinyin_mapper.PinyinMapper` takes a character-to-pinyin table.
You can pass it as a mapping or load it with `from_json()` from a list of
`{"pinyin": ..., "word": ...}` objects. `convert()` replaces each known
character with its pinyin, puts spaces between the syllables and leaves
other characters as they are:

```python
from zerolaunch.pinyin_mapper import PinyinMapper

mapper = PinyinMapper({"微": "wei", "软": "ruan"})
mapper.convert("微软office")  # "wei ruan office"
```

## Finding files

`zerolaunch.path_checker.PathChecker` matches lower-cased file names against
patterns. The pattern type is `PatternType.WILDCARD` or `PatternType.REGEX`,
and it also accepts `"Wildcard"` or `"Regex"`.

- A wildcard pattern must match the whole name. It supports `*`, `?`, `[..]`
  and `{a,b}`.
- A regex pattern may match anywhere in the name.
- A name that contains an excluded keyword never matches.
- An unknown pattern type or a pattern that does not compile raises
  `ValueError`.

`zerolaunch.file_scanner.scan_directory(root, depth, checker, forbidden_paths)`
returns the matching files under `root`, and `depth` sets how many folder
levels it descends, counting `root` itself. Entries are visited in name order.
It skips folders that cannot be read and logs a warning for each one.
`is_valid_path()` rejects a path that does not exist or that lies under a
forbidden path.

```python
from zerolaunch.file_scanner import scan_directory
from zerolaunch.path_checker import PathChecker

checker = PathChecker(["*.exe", "*.lnk"], "Wildcard", ["uninstall"])
checker.is_match("Notepad.EXE")    # True
checker.is_match("Uninstall.exe")  # False
files = scan_directory("/some/folder", 3, checker, [])
```

## What this package does not do

- It does not rank programs against what the user types.
- It does not build program entries from the files it finds.
- It does not start programs or open their folders.
- It does not update launch statistics while the launcher runs. It only stores
  and validates them.
- It has no window, no global hotkey handling, no icon loading and no
  command-line tool.
- It does not read or write configuration files itself. `save_local_config()`
  and `load_local_config()` work on text, and the caller stores that text.
- It ships no pinyin table. The caller provides one.

## Running the tests

```
pip install -e .[test]
pytest
```