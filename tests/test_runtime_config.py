import json

from zerolaunch.app_config import PartialAppConfig
from zerolaunch.loader_config import PartialProgramLoaderConfig
from zerolaunch.program_manager_config import PartialProgramManagerConfig
from zerolaunch.runtime_config import (
    PartialRuntimeConfig,
    RuntimeConfig,
    load_local_config,
    save_local_config,
)
from zerolaunch.shortcut_config import PartialShortcutConfig, Shortcut
from zerolaunch.window_state import PartialWindowState


def test_to_partial_omits_window_state():
    partial = RuntimeConfig().to_partial()
    assert partial.window_state is None
    assert partial.app_config.search_result_count == 4
    assert partial.shortcut_config.open_search_bar == Shortcut(key="Space", alt=True)


def test_update_reaches_every_section():
    config = RuntimeConfig()
    config.update(
        PartialRuntimeConfig(
            app_config=PartialAppConfig(search_result_count=8),
            shortcut_config=PartialShortcutConfig(arrow_up=Shortcut(key="u", ctrl=True)),
            window_state=PartialWindowState(sys_window_width=1920),
            program_manager_config=PartialProgramManagerConfig(
                loader=PartialProgramLoaderConfig(forbidden_paths=["C:/skip"])
            ),
        )
    )
    assert config.app_config.search_result_count == 8
    assert config.shortcut_config.arrow_up == Shortcut(key="u", ctrl=True)
    assert config.window_state.sys_window_width == 1920
    assert config.program_manager_config.loader_config.forbidden_paths == ["C:/skip"]


def test_save_writes_version_two():
    document = json.loads(save_local_config(RuntimeConfig().to_partial()))
    assert document["version"] == "2"
    assert document["config_data"]["window_state"] is None


def test_save_and_load_round_trip():
    config = RuntimeConfig()
    config.update(PartialRuntimeConfig(app_config=PartialAppConfig(tips="hi", window_position=(3, -4))))
    partial = config.to_partial()
    assert load_local_config(save_local_config(partial)) == partial


def test_garbage_yields_defaults():
    assert load_local_config("not json") == RuntimeConfig().to_partial()


def test_other_version_yields_defaults():
    custom = PartialRuntimeConfig(app_config=PartialAppConfig(search_result_count=9))
    document = json.loads(save_local_config(custom))
    document["version"] = "1"
    loaded = load_local_config(json.dumps(document))
    assert loaded == RuntimeConfig().to_partial()


def test_missing_config_data_yields_defaults():
    loaded = load_local_config(json.dumps({"version": "2"}))
    assert loaded == RuntimeConfig().to_partial()


def test_partial_sections_load_as_given():
    text = json.dumps({"version": "2", "config_data": {"app_config": {"tips": "x"}}})
    loaded = load_local_config(text)
    assert loaded.app_config.tips == "x"
    assert loaded.shortcut_config is None
    assert loaded.program_manager_config is None