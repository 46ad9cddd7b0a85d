import json

import pytest

from zerolaunch.image_loader_config import PartialImageLoaderConfig
from zerolaunch.launcher_config import PartialProgramLauncherConfig
from zerolaunch.loader_config import PartialProgramLoaderConfig
from zerolaunch.program_manager_config import (
    PartialProgramManagerConfig,
    ProgramManagerConfig,
)


def test_default_to_partial_is_fully_populated():
    partial = ProgramManagerConfig().to_partial()
    assert partial.image_loader.enable_icon_cache is True
    assert partial.image_loader.enable_online is True
    assert partial.loader.is_scan_uwp_programs is True
    assert partial.launcher.launch_info == [{}]


def test_update_reaches_sections():
    config = ProgramManagerConfig()
    config.update(
        PartialProgramManagerConfig(
            image_loader=PartialImageLoaderConfig(enable_online=False),
            loader=PartialProgramLoaderConfig(custom_command=[("ls", "cmd /c dir")]),
            launcher=PartialProgramLauncherConfig(history_launch_time={"a.exe": 3}),
        )
    )
    assert config.image_loader_config.enable_online is False
    assert config.image_loader_config.enable_icon_cache is True
    assert config.loader_config.custom_command == [("ls", "cmd /c dir")]
    assert config.launcher_config.history_launch_time == {"a.exe": 3}


def test_update_with_nothing_keeps_settings():
    config = ProgramManagerConfig()
    before = config.to_partial()
    config.update(PartialProgramManagerConfig())
    assert config.to_partial() == before


def test_round_trip_through_json():
    partial = ProgramManagerConfig().to_partial()
    text = json.dumps(partial.to_dict())
    assert PartialProgramManagerConfig.from_dict(json.loads(text)) == partial


def test_missing_sections_are_absent():
    partial = PartialProgramManagerConfig.from_dict({"image_loader": {"enable_online": True}})
    assert partial.launcher is None
    assert partial.loader is None
    assert partial.image_loader == PartialImageLoaderConfig(enable_online=True)


def test_non_mapping_raises():
    with pytest.raises(TypeError):
        PartialProgramManagerConfig.from_dict(["launcher"])