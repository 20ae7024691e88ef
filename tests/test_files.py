import pytest

from quantumn.tools.files import (
    ToolError,
    append_file,
    edit_line,
    read_file,
    read_file_limit,
    read_file_with_lines,
    write_file,
)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "note.txt"
    write_file(target, "hello\nworld\n")
    assert read_file(target) == "hello\nworld\n"


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "a" / "b" / "c.txt"
    write_file(target, "deep")
    assert target.read_text(encoding="utf-8") == "deep"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ToolError):
        read_file(tmp_path / "missing.txt")


def test_read_with_line_numbers(tmp_path):
    target = tmp_path / "f.txt"
    write_file(target, "a\nb\n")
    assert read_file_with_lines(target) == "     1 | a\n     2 | b"


def test_read_with_line_numbers_strips_carriage_returns(tmp_path):
    target = tmp_path / "f.txt"
    write_file(target, "x\r\ny")
    result = read_file_with_lines(target)
    assert "\r" not in result
    assert result.splitlines()[1].endswith("| y")


def test_read_file_limit(tmp_path):
    target = tmp_path / "f.txt"
    write_file(target, "l0\nl1\nl2\nl3")
    assert read_file_limit(target, 1, 2) == "l1\nl2"
    assert read_file_limit(target, 3, 10) == "l3"
    assert read_file_limit(target, 10, 2) == ""


def test_append_file(tmp_path):
    target = tmp_path / "log.txt"
    append_file(target, "first")
    append_file(target, "second")
    assert read_file(target) == "firstsecond"


def test_append_to_missing_directory_raises(tmp_path):
    with pytest.raises(ToolError):
        append_file(tmp_path / "nope" / "log.txt", "x")


def test_edit_line_replaces_line(tmp_path):
    target = tmp_path / "f.txt"
    write_file(target, "x\ny\nz\n")
    edit_line(target, 2, "Y")
    assert read_file(target) == "x\nY\nz"


@pytest.mark.parametrize("line_num", [0, 4, 100])
def test_edit_line_out_of_range(tmp_path, line_num):
    target = tmp_path / "f.txt"
    write_file(target, "x\ny\nz\n")
    with pytest.raises(ToolError, match="Invalid line number"):
        edit_line(target, line_num, "new")
    assert read_file(target) == "x\ny\nz\n"