"""Persisted launch statistics: daily counts, totals and last launch times."""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

_DATE_FORMAT = "%Y-%m-%d"


def current_date() -> str:
    """Return today's date as text, as stored in the launcher config."""
    return date.today().strftime(_DATE_FORMAT)


def is_date_current(date_text: str) -> bool:
    """Tell whether ``date_text`` denotes today."""
    return date_text == current_date()


def _count_map(name: str, value: Any, *, signed: bool) -> dict[str, int]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a mapping")
    result: dict[str, int] = {}
    for key, count in value.items():
        if not isinstance(key, str):
            raise TypeError(f"{name} keys must be strings")
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"{name} values must be integers")
        if not signed and count < 0:
            raise ValueError(f"{name} values must not be negative: {count}")
        result[key] = count
    return result


def _launch_info(value: Any) -> list[dict[str, int]]:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
        raise TypeError("launch_info must be a list of mappings")
    return [_count_map("launch_info", day, signed=False) for day in value]


@dataclass
class PartialProgramLauncherConfig:
    """Launch statistics in which any field may be absent."""

    launch_info: Optional[list[dict[str, int]]] = None
    history_launch_time: Optional[dict[str, int]] = None
    last_update_data: Optional[str] = None
    latest_launch_time: Optional[dict[str, int]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""
        return {
            "launch_info": copy.deepcopy(self.launch_info),
            "history_launch_time": copy.deepcopy(self.history_launch_time),
            "last_update_data": self.last_update_data,
            "latest_launch_time": copy.deepcopy(self.latest_launch_time),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialProgramLauncherConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("launcher config data must be a mapping")
        launch_info = data.get("launch_info")
        history = data.get("history_launch_time")
        last_update = data.get("last_update_data")
        latest = data.get("latest_launch_time")
        if last_update is not None and not isinstance(last_update, str):
            raise TypeError("last_update_data must be a string")
        return cls(
            launch_info=None if launch_info is None else _launch_info(launch_info),
            history_launch_time=None
            if history is None
            else _count_map("history_launch_time", history, signed=False),
            last_update_data=last_update,
            latest_launch_time=None
            if latest is None
            else _count_map("latest_launch_time", latest, signed=True),
        )


def _default_launch_info() -> list[dict[str, int]]:
    return [{}]


@dataclass
class ProgramLauncherConfig:
    """Launch statistics with defaults; the newest day comes first in ``launch_info``."""

    launch_info: list[dict[str, int]] = field(default_factory=_default_launch_info)
    history_launch_time: dict[str, int] = field(default_factory=dict)
    last_update_data: str = field(default_factory=current_date)
    latest_launch_time: dict[str, int] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialProgramLauncherConfig) -> None:
        """Replace every field present in ``partial``."""
        with self._lock:
            if partial.launch_info is not None:
                self.launch_info = copy.deepcopy(partial.launch_info)
            if partial.history_launch_time is not None:
                self.history_launch_time = dict(partial.history_launch_time)
            if partial.last_update_data is not None:
                self.last_update_data = partial.last_update_data
            if partial.latest_launch_time is not None:
                self.latest_launch_time = dict(partial.latest_launch_time)

    def to_partial(self) -> PartialProgramLauncherConfig:
        """Return an independent, fully populated copy of the statistics."""
        with self._lock:
            return PartialProgramLauncherConfig(
                launch_info=copy.deepcopy(self.launch_info),
                history_launch_time=dict(self.history_launch_time),
                last_update_data=self.last_update_data,
                latest_launch_time=dict(self.latest_launch_time),
            )