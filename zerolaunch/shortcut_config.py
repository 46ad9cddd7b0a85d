"""Keyboard shortcuts: the key combinations and their configured defaults."""

from __future__ import annotations

import string
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

_NAMED_KEYS = {"Space": "Space", "Tab": "Tab", "CapsLock": "CapsLock"}

_SHORTCUT_FIELDS = ("open_search_bar", "arrow_up", "arrow_down", "arrow_left", "arrow_right")


def shortcut_key_code(key: str) -> str:
    """Map a shortcut key name to its key code, e.g. ``"a"`` to ``"KeyA"``.

    Single ASCII letters and digits map to ``KeyX`` and ``DigitN``; the only
    longer names accepted are ``Space``, ``Tab`` and ``CapsLock``.
    """
    if len(key) == 1 and key.isascii():
        if key in string.ascii_letters:
            return f"Key{key.upper()}"
        if key in string.digits:
            return f"Digit{key}"
    elif key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    raise ValueError(f"invalid key: {key!r}")


@dataclass(frozen=True)
class Shortcut:
    """A key together with the modifier keys that must be held."""

    key: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    meta: bool = False

    @property
    def key_code(self) -> str:
        """The key code of ``key``; raises ValueError for an unknown key."""
        return shortcut_key_code(self.key)

    @property
    def modifiers(self) -> frozenset[str]:
        """Names of the modifiers held, empty when there are none."""
        names = ("ctrl", "alt", "shift", "meta")
        return frozenset(name for name in names if getattr(self, name))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "key": self.key,
            "ctrl": self.ctrl,
            "alt": self.alt,
            "shift": self.shift,
            "meta": self.meta,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shortcut":
        """Build from a mapping that holds every field."""
        if not isinstance(data, Mapping):
            raise TypeError("shortcut data must be a mapping")
        missing = [name for name in ("key", "ctrl", "alt", "shift", "meta") if name not in data]
        if missing:
            raise ValueError(f"shortcut is missing fields: {', '.join(missing)}")
        if not isinstance(data["key"], str):
            raise TypeError("key must be a string")
        for name in ("ctrl", "alt", "shift", "meta"):
            if not isinstance(data[name], bool):
                raise TypeError(f"{name} must be a boolean")
        return cls(
            key=data["key"],
            ctrl=data["ctrl"],
            alt=data["alt"],
            shift=data["shift"],
            meta=data["meta"],
        )


def _optional_shortcut(value: Any) -> Optional[Shortcut]:
    if value is None:
        return None
    if isinstance(value, Shortcut):
        return value
    return Shortcut.from_dict(value)


@dataclass
class PartialShortcutConfig:
    """Shortcut settings in which any field may be absent."""

    open_search_bar: Optional[Shortcut] = None
    arrow_up: Optional[Shortcut] = None
    arrow_down: Optional[Shortcut] = None
    arrow_left: Optional[Shortcut] = None
    arrow_right: Optional[Shortcut] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""
        result: dict[str, Any] = {}
        for name in _SHORTCUT_FIELDS:
            value = getattr(self, name)
            result[name] = None if value is None else value.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialShortcutConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("shortcut config data must be a mapping")
        return cls(**{name: _optional_shortcut(data.get(name)) for name in _SHORTCUT_FIELDS})


@dataclass
class ShortcutConfig:
    """The configured shortcuts, guarded by a lock."""

    open_search_bar: Shortcut = field(default_factory=lambda: Shortcut(key="Space", alt=True))
    arrow_up: Shortcut = field(default_factory=lambda: Shortcut(key="k", ctrl=True))
    arrow_down: Shortcut = field(default_factory=lambda: Shortcut(key="j", ctrl=True))
    arrow_left: Shortcut = field(default_factory=lambda: Shortcut(key="h", ctrl=True))
    arrow_right: Shortcut = field(default_factory=lambda: Shortcut(key="l", ctrl=True))
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialShortcutConfig) -> None:
        """Replace every shortcut present in ``partial``."""
        with self._lock:
            for name in _SHORTCUT_FIELDS:
                value = getattr(partial, name)
                if value is not None:
                    setattr(self, name, value)

    def to_partial(self) -> PartialShortcutConfig:
        """Return every shortcut as a fully populated partial config."""
        with self._lock:
            return PartialShortcutConfig(**{name: getattr(self, name) for name in _SHORTCUT_FIELDS})