"""State of the screen the launcher window is shown on."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT_FIELDS = (
    "sys_window_width",
    "sys_window_height",
    "sys_window_locate_width",
    "sys_window_locate_height",
)


def _check_int(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _check_float(name: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


@dataclass
class PartialWindowState:
    """Screen information in which any field may be absent."""

    sys_window_scale_factor: Optional[float] = None
    sys_window_width: Optional[int] = None
    sys_window_height: Optional[int] = None
    sys_window_locate_width: Optional[int] = None
    sys_window_locate_height: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialWindowState":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("window state data must be a mapping")
        values: dict[str, Any] = {
            "sys_window_scale_factor": _check_float(
                "sys_window_scale_factor", data.get("sys_window_scale_factor")
            )
        }
        for name in _INT_FIELDS:
            values[name] = _check_int(name, data.get(name))
        return cls(**values)


@dataclass
class WindowState:
    """Scale factor, size and origin of the current screen, guarded by a lock."""

    sys_window_scale_factor: float = 1.0
    sys_window_width: int = 0
    sys_window_height: int = 0
    sys_window_locate_width: int = 0
    sys_window_locate_height: int = 0
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialWindowState) -> None:
        """Apply every present field of ``partial``."""
        with self._lock:
            for name in ("sys_window_scale_factor", *_INT_FIELDS):
                value = getattr(partial, name)
                if value is not None:
                    setattr(self, name, value)