"""Settings of the program loader: folders to scan, biases, web pages and commands."""

from __future__ import annotations

import copy
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_PATTERNS = ("*.url", "*.exe", "*.lnk")
DEFAULT_PATTERN_TYPE = "Wildcard"
DEFAULT_EXCLUDED_KEYWORDS = ("帮助", "help", "uninstall", "卸载", "zerolaunch-rs")

_U32_MAX = 0xFFFFFFFF
_DIRECTORY_FIELDS = ("root_path", "max_depth", "pattern", "pattern_type", "excluded_keywords")

Pair = tuple[str, str]
Bias = tuple[float, str]


def _check_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _check_u32(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _check_sequence(name: str, value: Any) -> list[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
        raise TypeError(f"{name} must be a list")
    return list(value)


def _check_str_list(name: str, value: Any) -> list[str]:
    return [_check_str(name, item) for item in _check_sequence(name, value)]


def _check_pair(name: str, value: Any) -> Pair:
    items = _check_sequence(name, value)
    if len(items) != 2:
        raise ValueError(f"{name} entries must have exactly two items")
    return (_check_str(name, items[0]), _check_str(name, items[1]))


def _check_pairs(name: str, value: Any) -> list[Pair]:
    return [_check_pair(name, item) for item in _check_sequence(name, value)]


def _check_bias(value: Any) -> dict[str, Bias]:
    if not isinstance(value, Mapping):
        raise TypeError("program_bias must be a mapping")
    result: dict[str, Bias] = {}
    for key, entry in value.items():
        _check_str("program_bias key", key)
        items = _check_sequence("program_bias", entry)
        if len(items) != 2:
            raise ValueError("program_bias entries must be a (bias, note) pair")
        bias, note = items
        if isinstance(bias, bool) or not isinstance(bias, (int, float)):
            raise TypeError("program_bias weight must be a number")
        result[key] = (float(bias), _check_str("program_bias note", note))
    return result


@dataclass
class DirectoryConfig:
    """A folder to scan, how deep to go and which files to pick up."""

    root_path: str
    max_depth: int
    pattern: list[str] = field(default_factory=list)
    pattern_type: str = DEFAULT_PATTERN_TYPE
    excluded_keywords: list[str] = field(default_factory=list)

    @classmethod
    def with_defaults(cls, root_path: str, max_depth: int) -> "DirectoryConfig":
        """A folder scanned for shortcuts and executables, skipping helpers and uninstallers."""
        return cls(
            root_path=root_path,
            max_depth=max_depth,
            pattern=list(DEFAULT_PATTERNS),
            pattern_type=DEFAULT_PATTERN_TYPE,
            excluded_keywords=list(DEFAULT_EXCLUDED_KEYWORDS),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "root_path": self.root_path,
            "max_depth": self.max_depth,
            "pattern": list(self.pattern),
            "pattern_type": self.pattern_type,
            "excluded_keywords": list(self.excluded_keywords),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DirectoryConfig":
        """Build from a mapping that holds every field."""
        if not isinstance(data, Mapping):
            raise TypeError("directory config data must be a mapping")
        missing = [name for name in _DIRECTORY_FIELDS if name not in data]
        if missing:
            raise ValueError(f"directory config is missing fields: {', '.join(missing)}")
        return cls(
            root_path=_check_str("root_path", data["root_path"]),
            max_depth=_check_u32("max_depth", data["max_depth"]),
            pattern=_check_str_list("pattern", data["pattern"]),
            pattern_type=_check_str("pattern_type", data["pattern_type"]),
            excluded_keywords=_check_str_list("excluded_keywords", data["excluded_keywords"]),
        )


@dataclass
class PartialProgramLoaderConfig:
    """Loader settings in which any field may be absent."""

    target_paths: Optional[list[DirectoryConfig]] = None
    program_bias: Optional[dict[str, Bias]] = None
    is_scan_uwp_programs: Optional[bool] = None
    index_web_pages: Optional[list[Pair]] = None
    custom_command: Optional[list[Pair]] = None
    forbidden_paths: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; absent fields map to None."""

        def pairs(value: Optional[list[Pair]]) -> Optional[list[list[str]]]:
            return None if value is None else [list(item) for item in value]

        return {
            "target_paths": None
            if self.target_paths is None
            else [item.to_dict() for item in self.target_paths],
            "program_bias": None
            if self.program_bias is None
            else {key: list(entry) for key, entry in self.program_bias.items()},
            "is_scan_uwp_programs": self.is_scan_uwp_programs,
            "index_web_pages": pairs(self.index_web_pages),
            "custom_command": pairs(self.custom_command),
            "forbidden_paths": None if self.forbidden_paths is None else list(self.forbidden_paths),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PartialProgramLoaderConfig":
        """Build from a mapping; missing keys stay absent, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError("loader config data must be a mapping")
        target_paths = data.get("target_paths")
        bias = data.get("program_bias")
        scan_uwp = data.get("is_scan_uwp_programs")
        web_pages = data.get("index_web_pages")
        commands = data.get("custom_command")
        forbidden = data.get("forbidden_paths")
        if scan_uwp is not None and not isinstance(scan_uwp, bool):
            raise TypeError("is_scan_uwp_programs must be a boolean")
        return cls(
            target_paths=None
            if target_paths is None
            else [
                DirectoryConfig.from_dict(item)
                for item in _check_sequence("target_paths", target_paths)
            ],
            program_bias=None if bias is None else _check_bias(bias),
            is_scan_uwp_programs=scan_uwp,
            index_web_pages=None if web_pages is None else _check_pairs("index_web_pages", web_pages),
            custom_command=None if commands is None else _check_pairs("custom_command", commands),
            forbidden_paths=None
            if forbidden is None
            else _check_str_list("forbidden_paths", forbidden),
        )


def _folder(env_name: str, *parts: str) -> str:
    base = os.environ.get(env_name)
    return str(Path(base, *parts)) if base else ""


def default_target_paths() -> list[DirectoryConfig]:
    """The common and the user start menu, five levels deep, and the desktop, three."""
    start_menu = ("Microsoft", "Windows", "Start Menu", "Programs")
    return [
        DirectoryConfig.with_defaults(_folder("PROGRAMDATA", *start_menu), 5),
        DirectoryConfig.with_defaults(_folder("APPDATA", *start_menu), 5),
        DirectoryConfig.with_defaults(_folder("USERPROFILE", "Desktop"), 3),
    ]


@dataclass
class ProgramLoaderConfig:
    """What the program loader scans and indexes, guarded by a lock."""

    target_paths: list[DirectoryConfig] = field(default_factory=default_target_paths)
    program_bias: dict[str, Bias] = field(default_factory=dict)
    is_scan_uwp_programs: bool = True
    index_web_pages: list[Pair] = field(default_factory=list)
    custom_command: list[Pair] = field(default_factory=list)
    forbidden_paths: list[str] = field(default_factory=list)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def update(self, partial: PartialProgramLoaderConfig) -> None:
        """Replace every field present in ``partial``."""
        with self._lock:
            if partial.target_paths is not None:
                self.target_paths = copy.deepcopy(partial.target_paths)
            if partial.program_bias is not None:
                self.program_bias = dict(partial.program_bias)
            if partial.is_scan_uwp_programs is not None:
                self.is_scan_uwp_programs = partial.is_scan_uwp_programs
            if partial.index_web_pages is not None:
                self.index_web_pages = list(partial.index_web_pages)
            if partial.custom_command is not None:
                self.custom_command = list(partial.custom_command)
            if partial.forbidden_paths is not None:
                self.forbidden_paths = list(partial.forbidden_paths)

    def to_partial(self) -> PartialProgramLoaderConfig:
        """Return an independent, fully populated copy of the settings."""
        with self._lock:
            return PartialProgramLoaderConfig(
                target_paths=copy.deepcopy(self.target_paths),
                program_bias=dict(self.program_bias),
                is_scan_uwp_programs=self.is_scan_uwp_programs,
                index_web_pages=list(self.index_web_pages),
                custom_command=list(self.custom_command),
                forbidden_paths=list(self.forbidden_paths),
            )