"""Regular-expression search over files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from quantumn.tools.files import ToolError, read_file


@dataclass
class SearchResult:
    """One matching line."""

    file: str
    line: int
    content: str


def _lines(content: str) -> list[str]:
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ToolError(f"Invalid regex pattern: {exc}") from exc


def search_file(path: str | os.PathLike[str], pattern: str) -> list[SearchResult]:
    """All lines of a file that match the pattern, numbered from 1."""
    content = read_file(path)
    regex = _compile(pattern)
    name = str(path)
    return [
        SearchResult(file=name, line=number, content=line)
        for number, line in enumerate(_lines(content), start=1)
        if regex.search(line)
    ]


def search_pattern(
    files: Iterable[str | os.PathLike[str]], pattern: str
) -> list[SearchResult]:
    """Search every regular file among ``files``; others are skipped."""
    results: list[SearchResult] = []
    for file in files:
        if Path(file).is_file():
            results.extend(search_file(file, pattern))
    return results


def search_with_context(
    path: str | os.PathLike[str], pattern: str, context: int
) -> list[tuple[SearchResult, list[str]]]:
    """Matches together with up to ``context`` lines before and after each."""
    content = read_file(path)
    regex = _compile(pattern)
    lines = _lines(content)
    name = str(path)
    results: list[tuple[SearchResult, list[str]]] = []
    for index, line in enumerate(lines):
        if regex.search(line):
            start = max(index - context, 0)
            end = min(index + context + 1, len(lines))
            results.append(
                (
                    SearchResult(file=name, line=index + 1, content=line),
                    lines[start:end],
                )
            )
    return results