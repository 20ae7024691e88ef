"""Simple recursive file finding by pattern and extension."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

_SKIPPED_DIRS = frozenset({"node_modules", "target", "build", "dist", "vendor"})


def _entries(directory: Path) -> Iterator[os.DirEntry[str]]:
    """Directory entries, or nothing if the directory cannot be read."""
    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except OSError:
        return
    yield from entries


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _walk_files(directory: Path) -> Iterator[Path]:
    for entry in _entries(directory):
        path = Path(entry.path)
        if _is_dir(entry):
            yield from _walk_files(path)
        else:
            yield path


def _matches(name: str, parts: list[str]) -> bool:
    if len(parts) == 1:
        return parts[0] in name
    first, last = parts[0], parts[-1]
    if first and not name.startswith(first):
        return False
    if last and not name.endswith(last):
        return False
    return True


def find_files(pattern: str, base: str | os.PathLike[str]) -> list[Path]:
    """Files under ``base`` matching a pattern.

    A pattern with ``*`` is matched against file names recursively using only
    its leading and trailing parts; any other pattern is an exact relative path.
    """
    base = Path(base)
    if not base.exists():
        return []
    if "*" in pattern:
        parts = pattern.split("*")
        return [path for path in _walk_files(base) if _matches(path.name, parts)]
    candidate = base / pattern
    return [candidate] if candidate.exists() else []


def _extension(name: str) -> str | None:
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def find_by_extension(ext: str, base: str | os.PathLike[str]) -> list[Path]:
    """Files under ``base`` whose extension is exactly ``ext``."""
    return [path for path in _walk_files(Path(base)) if _extension(path.name) == ext]


def _walk_source_files(directory: Path) -> Iterator[Path]:
    for entry in _entries(directory):
        path = Path(entry.path)
        if _is_dir(entry):
            if entry.name.startswith(".") or entry.name in _SKIPPED_DIRS:
                continue
            yield from _walk_source_files(path)
        else:
            yield path


def find_all_files(base: str | os.PathLike[str]) -> list[Path]:
    """All files under ``base``, skipping hidden and build or dependency folders."""
    return list(_walk_source_files(Path(base)))