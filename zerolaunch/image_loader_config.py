"""Settings of the icon loader: caching and online fetching."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

_FIELDS = ("enable_icon_cache", "enable_online")


@dataclass
class PartialImageLoaderConfig:
    """Icon loader settings in which any field may be absent."""

    enable_icon_cache: Optional[bool] = None
    enable_online: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""
        return {name: getattr(self, name) for name in _FIELDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialImageLoaderConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("image loader config data must be a mapping")
        values: dict[str, Optional[bool]] = {}
        for name in _FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, bool):
                raise TypeError(f"{name} must be a boolean, got {type(value).__name__}")
            values[name] = value
        return cls(**values)


@dataclass
class ImageLoaderConfig:
    """Whether icons are cached on disk and whether web icons are fetched online."""

    enable_icon_cache: bool = True
    enable_online: bool = True
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialImageLoaderConfig) -> None:
        """Apply every present field of ``partial``."""
        with self._lock:
            for name in _FIELDS:
                value = getattr(partial, name)
                if value is not None:
                    setattr(self, name, value)

    def to_partial(self) -> PartialImageLoaderConfig:
        """Return every setting as a fully populated partial config."""
        with self._lock:
            return PartialImageLoaderConfig(
                enable_icon_cache=self.enable_icon_cache,
                enable_online=self.enable_online,
            )