import pytest

from zerolaunch.image_loader_config import ImageLoaderConfig, PartialImageLoaderConfig


def test_defaults():
    config = ImageLoaderConfig()
    assert config.enable_icon_cache is True
    assert config.enable_online is True


def test_update_applies_present_fields():
    config = ImageLoaderConfig()
    config.update(PartialImageLoaderConfig(enable_online=False))
    assert config.enable_online is False
    assert config.enable_icon_cache is True


def test_update_with_empty_partial_changes_nothing():
    config = ImageLoaderConfig(enable_icon_cache=False, enable_online=False)
    config.update(PartialImageLoaderConfig())
    assert (config.enable_icon_cache, config.enable_online) == (False, False)


def test_to_partial_reflects_state():
    config = ImageLoaderConfig(enable_icon_cache=False)
    partial = config.to_partial()
    assert partial == PartialImageLoaderConfig(enable_icon_cache=False, enable_online=True)


def test_partial_round_trip():
    partial = PartialImageLoaderConfig(enable_icon_cache=False, enable_online=True)
    assert PartialImageLoaderConfig.from_dict(partial.to_dict()) == partial


def test_from_dict_missing_keys_are_absent():
    partial = PartialImageLoaderConfig.from_dict({"other": 1})
    assert partial.to_dict() == {"enable_icon_cache": None, "enable_online": None}


def test_from_dict_wrong_type():
    with pytest.raises(TypeError):
        PartialImageLoaderConfig.from_dict({"enable_online": "yes"})


def test_from_dict_non_mapping():
    with pytest.raises(TypeError):
        PartialImageLoaderConfig.from_dict("enable_online")