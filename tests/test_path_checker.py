import pytest

from zerolaunch.path_checker import PathChecker, PatternType


def test_wildcard_matches_lowercased_name():
    checker = PathChecker(["*.exe"], "Wildcard", [])
    assert checker.is_match("Notepad.EXE") is True


def test_wildcard_rejects_other_extension():
    checker = PathChecker(["*.exe", "*.lnk"], PatternType.WILDCARD, [])
    assert checker.is_match("readme.txt") is False


def test_wildcard_pattern_case_is_kept():
    checker = PathChecker(["*.EXE"], "Wildcard", [])
    assert checker.is_match("app.exe") is False


def test_wildcard_alternation_and_question_mark():
    checker = PathChecker(["*.{exe,lnk}", "a?c.txt"], "Wildcard", [])
    assert checker.is_match("tool.lnk") is True
    assert checker.is_match("abc.txt") is True
    assert checker.is_match("abbc.txt") is False


def test_wildcard_character_class():
    checker = PathChecker(["[!x]*.exe"], "Wildcard", [])
    assert checker.is_match("app.exe") is True
    assert checker.is_match("xapp.exe") is False


def test_excluded_keyword_blocks_match():
    checker = PathChecker(["*.exe"], "Wildcard", ["Help", "uninstall"])
    assert checker.is_match("Help_Viewer.exe") is False
    assert checker.is_match("Uninstall Tool.exe") is False
    assert checker.is_match("editor.exe") is True


def test_regex_searches_name():
    checker = PathChecker([r"\.lnk$"], "Regex", [])
    assert checker.is_match("Shortcut.LNK") is True
    assert checker.is_match("shortcut.lnk.bak") is False


def test_no_patterns_match_nothing():
    checker = PathChecker([], "Regex", [])
    assert checker.is_match("anything.exe") is False


def test_unknown_pattern_type():
    with pytest.raises(ValueError):
        PathChecker(["*.exe"], "Fuzzy", [])


def test_invalid_wildcard():
    with pytest.raises(ValueError):
        PathChecker(["[abc"], "Wildcard", [])


def test_unclosed_alternation():
    with pytest.raises(ValueError):
        PathChecker(["*.{exe,lnk"], "Wildcard", [])


def test_invalid_regex():
    with pytest.raises(ValueError):
        PathChecker(["("], "Regex", [])