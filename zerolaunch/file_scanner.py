"""Walks folders to find the files the program loader indexes."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Union

from zerolaunch.path_checker import PathChecker

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def is_valid_path(path: PathLike, forbidden_paths: Iterable[str]) -> bool:
    """Tell whether ``path`` exists and lies under none of ``forbidden_paths``.

    Empty entries in ``forbidden_paths`` are ignored.
    """
    candidate = Path(path)
    if not candidate.exists():
        return False
    return not any(
        forbidden and candidate.is_relative_to(Path(forbidden)) for forbidden in forbidden_paths
    )


def _is_target_file(path: Path, checker: PathChecker) -> bool:
    if not path.is_file() and not path.is_symlink():
        return False
    return checker.is_match(path.name)


def scan_directory(
    root: PathLike,
    depth: int,
    checker: PathChecker,
    forbidden_paths: Iterable[str],
) -> list[str]:
    """Return the paths of wanted files under ``root``.

    ``depth`` counts folder levels: 1 looks at ``root`` only. Folders that
    cannot be read are skipped with a warning. A ``root`` that is a file is
    returned as it is.
    """
    forbidden = list(forbidden_paths)
    directory = Path(root)
    if depth <= 0 or not is_valid_path(directory, forbidden):
        return []

    if not directory.is_dir():
        return [str(directory)]

    result: list[str] = []
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as error:
        logger.warning("error reading directory %s: %s", directory, error)
        return result

    for entry in entries:
        path = directory / entry.name
        try:
            if path.is_dir():
                result.extend(scan_directory(path, depth - 1, checker, forbidden))
            elif _is_target_file(path, checker):
                result.append(str(path))
        except OSError as error:
            logger.warning("error accessing %s: %s", path, error)
    return result