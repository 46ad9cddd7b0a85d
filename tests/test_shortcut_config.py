import pytest

from zerolaunch.shortcut_config import (
    PartialShortcutConfig,
    Shortcut,
    ShortcutConfig,
    shortcut_key_code,
)


@pytest.mark.parametrize(
    "key, code",
    [
        ("a", "KeyA"),
        ("Z", "KeyZ"),
        ("k", "KeyK"),
        ("0", "Digit0"),
        ("9", "Digit9"),
        ("Space", "Space"),
        ("Tab", "Tab"),
        ("CapsLock", "CapsLock"),
    ],
)
def test_key_codes(key, code):
    assert shortcut_key_code(key) == code


@pytest.mark.parametrize("key", ["", "!", "é", "space", "Enter", "ab"])
def test_invalid_keys_raise(key):
    with pytest.raises(ValueError):
        shortcut_key_code(key)


def test_defaults():
    config = ShortcutConfig()
    assert config.open_search_bar == Shortcut(key="Space", alt=True)
    assert config.arrow_up == Shortcut(key="k", ctrl=True)
    assert config.arrow_down == Shortcut(key="j", ctrl=True)
    assert config.arrow_left == Shortcut(key="h", ctrl=True)
    assert config.arrow_right == Shortcut(key="l", ctrl=True)


def test_shortcut_modifiers_and_code():
    shortcut = Shortcut(key="j", ctrl=True, shift=True)
    assert shortcut.modifiers == frozenset({"ctrl", "shift"})
    assert shortcut.key_code == "KeyJ"
    assert Shortcut(key="Space").modifiers == frozenset()


def test_shortcut_round_trip():
    shortcut = Shortcut(key="Tab", ctrl=True, alt=False, shift=True, meta=True)
    assert Shortcut.from_dict(shortcut.to_dict()) == shortcut


def test_shortcut_from_dict_missing_field():
    with pytest.raises(ValueError):
        Shortcut.from_dict({"key": "a", "ctrl": True})


def test_shortcut_from_dict_wrong_type():
    with pytest.raises(TypeError):
        Shortcut.from_dict({"key": "a", "ctrl": 1, "alt": False, "shift": False, "meta": False})


def test_partial_round_trip():
    partial = ShortcutConfig().to_partial()
    assert PartialShortcutConfig.from_dict(partial.to_dict()) == partial


def test_partial_absent_fields_stay_none():
    partial = PartialShortcutConfig.from_dict({"arrow_up": Shortcut(key="w").to_dict()})
    assert partial.arrow_up == Shortcut(key="w")
    assert partial.open_search_bar is None
    assert partial.to_dict()["arrow_down"] is None


def test_update_replaces_only_present():
    config = ShortcutConfig()
    new = Shortcut(key="1", meta=True)
    config.update(PartialShortcutConfig(open_search_bar=new))
    assert config.open_search_bar == new
    assert config.arrow_up == ShortcutConfig().arrow_up


def test_to_partial_matches_fields():
    config = ShortcutConfig()
    partial = config.to_partial()
    assert partial.arrow_left == config.arrow_left
    assert partial.arrow_right == config.arrow_right


def test_partial_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        PartialShortcutConfig.from_dict([1, 2])