"""Turns Chinese characters in a name into space-separated pinyin."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Optional


class PinyinMapper:
    """Maps single characters to their pinyin spelling."""

    def __init__(self, table: Optional[Mapping[str, str]] = None) -> None:
        self._table: dict[str, str] = dict(table or {})

    @classmethod
    def from_json(cls, text: str) -> "PinyinMapper":
        """Build from a JSON list of ``{"pinyin": ..., "word": ...}`` objects."""
        items = json.loads(text)
        if not isinstance(items, list):
            raise ValueError("pinyin data must be a JSON list")
        table: dict[str, str] = {}
        for item in items:
            if not isinstance(item, Mapping):
                raise ValueError("pinyin entries must be objects")
            pinyin = item.get("pinyin")
            word = item.get("word")
            if not isinstance(pinyin, str) or not isinstance(word, str):
                raise ValueError("pinyin entries need string 'pinyin' and 'word' fields")
            table[word] = pinyin
        return cls(table)

    def convert(self, word: str) -> str:
        """Replace every known character by its pinyin, separated by spaces."""
        parts: list[str] = []
        prev_is_han = False
        for ch in word:
            pinyin = self._table.get(ch)
            if pinyin is None:
                parts.append(ch)
                prev_is_han = False
                continue
            if not prev_is_han and parts:
                parts.append(" ")
            parts.append(pinyin)
            parts.append(" ")
            prev_is_han = True
        return "".join(parts).rstrip()