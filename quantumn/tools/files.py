"""Reading, writing and line-editing of text files."""

from __future__ import annotations

import os
from pathlib import Path


class ToolError(Exception):
    """Raised when a file or system tool cannot do its work."""


def _lines(content: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a UTF-8 text file."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ToolError(f"Failed to read file {str(path)!r}: {exc}") from exc


def read_file_with_lines(path: str | os.PathLike[str]) -> str:
    """Return the file's lines, each prefixed with its 1-based number."""
    return "\n".join(
        f"{number:6} | {line}"
        for number, line in enumerate(_lines(read_file(path)), start=1)
    )


def read_file_limit(path: str | os.PathLike[str], start: int, limit: int) -> str:
    """Return at most ``limit`` lines, skipping the first ``start`` lines."""
    return "\n".join(_lines(read_file(path))[start : start + limit])


def write_file(path: str | os.PathLike[str], content: str) -> None:
    """Write content to a file, creating parent directories as needed."""
    parent = Path(path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ToolError(f"Failed to create directory {str(parent)!r}: {exc}") from exc
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise ToolError(f"Failed to write file {str(path)!r}: {exc}") from exc


def append_file(path: str | os.PathLike[str], content: str) -> None:
    """Append content to a file, creating the file if it does not exist."""
    try:
        handle = open(path, "a", encoding="utf-8", newline="")
    except OSError as exc:
        raise ToolError(f"Failed to open file {str(path)!r}: {exc}") from exc
    with handle:
        try:
            handle.write(content)
        except OSError as exc:
            raise ToolError(f"Failed to append to file {str(path)!r}: {exc}") from exc


def edit_line(path: str | os.PathLike[str], line_num: int, new_content: str) -> None:
    """Replace the 1-based line ``line_num`` and rewrite the file."""
    lines = _lines(read_file(path))
    if line_num < 1 or line_num > len(lines):
        raise ToolError(f"Invalid line number: {line_num}")
    lines[line_num - 1] = new_content
    write_file(path, "\n".join(lines))