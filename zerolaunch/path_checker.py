"""Decides whether a file name is one the program loader should pick up."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Union


class PatternType(Enum):
    """How the patterns of a scanned folder are written."""

    WILDCARD = "Wildcard"
    REGEX = "Regex"


def _class_to_regex(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    body = body.replace("\\", "\\\\").replace("[", "\\[")
    return "[" + ("^" if negate else "") + body + "]"


def _glob_to_regex(pattern: str) -> str:
    """Translate a wildcard pattern with ``* ? [..] {a,b}`` into a regex."""
    out: list[str] = []
    depth = 0
    i = 0
    length = len(pattern)
    while i < length:
        c = pattern[i]
        if c == "*":
            if not out or out[-1] != ".*":
                out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i + 1
            if j < length and pattern[j] in "!^":
                j += 1
            if j < length and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end < 0:
                raise ValueError(f"unclosed character class in {pattern!r}")
            out.append(_class_to_regex(pattern[i + 1 : end]))
            i = end
        elif c == "{":
            depth += 1
            out.append("(?:")
        elif c == "}" and depth:
            depth -= 1
            out.append(")")
        elif c == "," and depth:
            out.append("|")
        elif c == "\\":
            if i + 1 >= length:
                raise ValueError(f"dangling escape in {pattern!r}")
            i += 1
            out.append(re.escape(pattern[i]))
        else:
            out.append(re.escape(c))
        i += 1
    if depth:
        raise ValueError(f"unclosed alternation in {pattern!r}")
    return "(?s:" + "".join(out) + r")\Z"


class PathChecker:
    """Matches lower-cased file names against wildcard or regex patterns.

    A name containing any excluded keyword (compared in lower case) never
    matches. Patterns themselves are used as given.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        pattern_type: Union[PatternType, str],
        excluded_keys: Iterable[str],
    ) -> None:
        try:
            self.pattern_type = PatternType(pattern_type)
        except ValueError:
            raise ValueError(f"unknown pattern type: {pattern_type}") from None
        self.excluded_keys = [key.lower() for key in excluded_keys]
        compiled: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                if self.pattern_type is PatternType.WILDCARD:
                    compiled.append(re.compile(_glob_to_regex(pattern)))
                else:
                    compiled.append(re.compile(pattern))
            except re.error as error:
                raise ValueError(f"invalid pattern {pattern!r}: {error}") from None
        self._patterns = compiled

    def is_match(self, path: str) -> bool:
        """Tell whether ``path`` is wanted."""
        path = path.lower()
        if any(key in path for key in self.excluded_keys):
            return False
        if self.pattern_type is PatternType.WILDCARD:
            return any(regex.match(path) for regex in self._patterns)
        return any(regex.search(path) for regex in self._patterns)