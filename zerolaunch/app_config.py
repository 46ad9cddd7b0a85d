"""Application-level settings: start-up behaviour, result count, window options."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

APP_VERSION = "0.1.0"

Position = tuple[int, int]

_U32_MAX = 0xFFFFFFFF
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_FIELD_KINDS: dict[str, str] = {
    "search_bar_placeholder": "str",
    "tips": "str",
    "is_auto_start": "bool",
    "is_silent_start": "bool",
    "search_result_count": "u32",
    "auto_refresh_time": "u32",
    "launch_new_on_failure": "bool",
    "is_debug_mode": "bool",
    "is_esc_hide_window_priority": "bool",
    "is_enable_drag_window": "bool",
    "window_position": "position",
    "is_wake_on_fullscreen": "bool",
    "space_is_enter": "bool",
    "show_pos_follow_mouse": "bool",
    "is_initial": "bool",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(name: str, value: Any) -> Any:
    """Check one incoming value against its field's kind and normalise it."""
    if value is None:
        return None
    kind = _FIELD_KINDS[name]
    if kind == "str":
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string, got {type(value).__name__}")
        return value
    if kind == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a boolean, got {type(value).__name__}")
        return value
    if kind == "u32":
        if not _is_int(value):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"{name} out of range: {value}")
        return value
    # position: a pair of signed 32-bit integers
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise TypeError(f"{name} must be a pair of integers")
    items = tuple(value)
    if len(items) != 2:
        raise ValueError(f"{name} must have exactly two items, got {len(items)}")
    for item in items:
        if not _is_int(item):
            raise TypeError(f"{name} must hold integers")
        if not _I32_MIN <= item <= _I32_MAX:
            raise ValueError(f"{name} out of range: {item}")
    return items


@dataclass
class PartialAppConfig:
    """A set of application settings in which any field may be absent."""

    search_bar_placeholder: Optional[str] = None
    tips: Optional[str] = None
    is_auto_start: Optional[bool] = None
    is_silent_start: Optional[bool] = None
    search_result_count: Optional[int] = None
    auto_refresh_time: Optional[int] = None
    launch_new_on_failure: Optional[bool] = None
    is_debug_mode: Optional[bool] = None
    is_esc_hide_window_priority: Optional[bool] = None
    is_enable_drag_window: Optional[bool] = None
    window_position: Optional[Position] = None
    is_wake_on_fullscreen: Optional[bool] = None
    space_is_enter: Optional[bool] = None
    show_pos_follow_mouse: Optional[bool] = None
    is_initial: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "window_position" and value is not None:
                value = list(value)
            result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialAppConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("app config data must be a mapping")
        return cls(**{name: _validate(name, data.get(name)) for name in _FIELD_KINDS})


def _default_tips() -> str:
    return f"ZeroLaunch-rs v{APP_VERSION}"


@dataclass
class AppConfig:
    """Thread-safe application settings with their defaults."""

    search_bar_placeholder: str = "Hello, ZeroLaunch!"
    tips: str = field(default_factory=_default_tips)
    is_auto_start: bool = False
    is_silent_start: bool = False
    search_result_count: int = 4
    auto_refresh_time: int = 30
    launch_new_on_failure: bool = True
    is_debug_mode: bool = False
    is_esc_hide_window_priority: bool = False
    is_enable_drag_window: bool = False
    window_position: Position = (0, 0)
    is_wake_on_fullscreen: bool = False
    space_is_enter: bool = False
    show_pos_follow_mouse: bool = False
    is_initial: bool = True
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialAppConfig) -> None:
        """Apply every present field; any update marks the config as initialised."""
        with self._lock:
            for name in _FIELD_KINDS:
                if name == "is_initial":
                    continue
                value = getattr(partial, name)
                if value is not None:
                    if name == "window_position":
                        value = tuple(value)
                    setattr(self, name, value)
            self.is_initial = True

    def to_partial(self) -> PartialAppConfig:
        """Return every setting as a fully populated partial config."""
        with self._lock:
            return PartialAppConfig(**{name: getattr(self, name) for name in _FIELD_KINDS})