"""Combined settings of the program manager: launcher, loader and icon loader."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from zerolaunch.image_loader_config import ImageLoaderConfig, PartialImageLoaderConfig
from zerolaunch.launcher_config import PartialProgramLauncherConfig, ProgramLauncherConfig
from zerolaunch.loader_config import PartialProgramLoaderConfig, ProgramLoaderConfig


@dataclass
class PartialProgramManagerConfig:
    """Program manager settings in which any section may be absent."""

    launcher: Optional[PartialProgramLauncherConfig] = None
    loader: Optional[PartialProgramLoaderConfig] = None
    image_loader: Optional[PartialImageLoaderConfig] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent sections map to None."""
        return {
            "launcher": None if self.launcher is None else self.launcher.to_dict(),
            "loader": None if self.loader is None else self.loader.to_dict(),
            "image_loader": None if self.image_loader is None else self.image_loader.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialProgramManagerConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("program manager config data must be a mapping")
        launcher = data.get("launcher")
        loader = data.get("loader")
        image_loader = data.get("image_loader")
        return cls(
            launcher=None if launcher is None else PartialProgramLauncherConfig.from_dict(launcher),
            loader=None if loader is None else PartialProgramLoaderConfig.from_dict(loader),
            image_loader=None
            if image_loader is None
            else PartialImageLoaderConfig.from_dict(image_loader),
        )


@dataclass
class ProgramManagerConfig:
    """The launcher, loader and icon loader settings held together."""

    launcher_config: ProgramLauncherConfig = field(default_factory=ProgramLauncherConfig)
    loader_config: ProgramLoaderConfig = field(default_factory=ProgramLoaderConfig)
    image_loader_config: ImageLoaderConfig = field(default_factory=ImageLoaderConfig)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialProgramManagerConfig) -> None:
        """Pass every present section on to its own settings."""
        with self._lock:
            if partial.launcher is not None:
                self.launcher_config.update(partial.launcher)
            if partial.loader is not None:
                self.loader_config.update(partial.loader)
            if partial.image_loader is not None:
                self.image_loader_config.update(partial.image_loader)

    def to_partial(self) -> PartialProgramManagerConfig:
        """Return every section as a fully populated partial config."""
        with self._lock:
            return PartialProgramManagerConfig(
                launcher=self.launcher_config.to_partial(),
                loader=self.loader_config.to_partial(),
                image_loader=self.image_loader_config.to_partial(),
            )