"""The whole runtime configuration and its versioned local file format."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from zerolaunch.app_config import AppConfig, PartialAppConfig
from zerolaunch.program_manager_config import (
    PartialProgramManagerConfig,
    ProgramManagerConfig,
)
from zerolaunch.shortcut_config import PartialShortcutConfig, ShortcutConfig
from zerolaunch.window_state import PartialWindowState, WindowState

LOCAL_CONFIG_VERSION = "2"


@dataclass
class PartialRuntimeConfig:
    """The runtime configuration in which any section may be absent."""

    app_config: Optional[PartialAppConfig] = None
    shortcut_config: Optional[PartialShortcutConfig] = None
    program_manager_config: Optional[PartialProgramManagerConfig] = None
    window_state: Optional[PartialWindowState] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent sections map to None."""
        return {
            "app_config": None if self.app_config is None else self.app_config.to_dict(),
            "shortcut_config": None
            if self.shortcut_config is None
            else self.shortcut_config.to_dict(),
            "program_manager_config": None
            if self.program_manager_config is None
            else self.program_manager_config.to_dict(),
            "window_state": None if self.window_state is None else self.window_state.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialRuntimeConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("runtime config data must be a mapping")
        app = data.get("app_config")
        shortcut = data.get("shortcut_config")
        manager = data.get("program_manager_config")
        window = data.get("window_state")
        return cls(
            app_config=None if app is None else PartialAppConfig.from_dict(app),
            shortcut_config=None if shortcut is None else PartialShortcutConfig.from_dict(shortcut),
            program_manager_config=None
            if manager is None
            else PartialProgramManagerConfig.from_dict(manager),
            window_state=None if window is None else PartialWindowState.from_dict(window),
        )


@dataclass
class RuntimeConfig:
    """All live configuration sections of the application."""

    app_config: AppConfig = field(default_factory=AppConfig)
    shortcut_config: ShortcutConfig = field(default_factory=ShortcutConfig)
    program_manager_config: ProgramManagerConfig = field(default_factory=ProgramManagerConfig)
    window_state: WindowState = field(default_factory=WindowState)

    def update(self, partial: PartialRuntimeConfig) -> None:
        """Pass every present section on to its own settings."""
        if partial.app_config is not None:
            self.app_config.update(partial.app_config)
        if partial.shortcut_config is not None:
            self.shortcut_config.update(partial.shortcut_config)
        if partial.program_manager_config is not None:
            self.program_manager_config.update(partial.program_manager_config)
        if partial.window_state is not None:
            self.window_state.update(partial.window_state)

    def to_partial(self) -> PartialRuntimeConfig:
        """Return the persistent sections; the window state is not saved."""
        return PartialRuntimeConfig(
            app_config=self.app_config.to_partial(),
            shortcut_config=self.shortcut_config.to_partial(),
            program_manager_config=self.program_manager_config.to_partial(),
            window_state=None,
        )


def save_local_config(partial_config: PartialRuntimeConfig) -> str:
    """Serialise ``partial_config`` as versioned JSON text."""
    data = {"version": LOCAL_CONFIG_VERSION, "config_data": partial_config.to_dict()}
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def load_local_config(data: str) -> PartialRuntimeConfig:
    """Read versioned JSON text; unreadable or outdated text yields the defaults."""
    try:
        document = json.loads(data)
        if not isinstance(document, Mapping):
            raise TypeError("local config must be a JSON object")
        version = document["version"]
        if not isinstance(version, str):
            raise TypeError("version must be a string")
        config = PartialRuntimeConfig.from_dict(document["config_data"])
    except (ValueError, TypeError, KeyError):
        return RuntimeConfig().to_partial()
    if version != LOCAL_CONFIG_VERSION:
        return RuntimeConfig().to_partial()
    return config