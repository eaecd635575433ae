"""read_file / write_file / get_file_dir."""
import os
import sys

import pytest

from hone.core.exceptions import IoError, PathError
from hone.core.file_access import get_file_dir, path_exists, read_file, write_file


def test_write_then_read_round_trip(tmp_path):
    """Content comes back byte-for-byte, including CRLF and non-ASCII."""
    path = tmp_path / "note.md"
    content = "# Title\r\nline two\nünïcødé ✓\n"
    write_file(str(path), content)
    assert read_file(str(path)) == content


def test_write_overwrites_existing(tmp_path):
    path = tmp_path / "a.txt"
    write_file(str(path), "a much longer first version")
    write_file(str(path), "short")
    assert read_file(str(path)) == "short"


def test_read_missing_file_raises_io_error(tmp_path):
    with pytest.raises(IoError) as exc:
        read_file(str(tmp_path / "missing.txt"))
    assert str(exc.value).startswith("Failed to read file: ")
    assert exc.value.kind == "IoError"


def test_read_invalid_utf8_raises_io_error(tmp_path):
    path = tmp_path / "bin.dat"
    path.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(IoError):
        read_file(str(path))


def test_read_directory_raises_io_error(tmp_path):
    with pytest.raises(IoError):
        read_file(str(tmp_path))


def test_write_into_missing_directory_raises_io_error(tmp_path):
    with pytest.raises(IoError) as exc:
        write_file(str(tmp_path / "nope" / "x.txt"), "data")
    assert str(exc.value).startswith("Failed to write file: ")


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX paths")
def test_get_file_dir_posix():
    assert get_file_dir("/a/b/c.txt") == "/a/b"
    assert get_file_dir("/a") == "/"
    assert get_file_dir("c.txt") == ""
    assert get_file_dir("rel/dir/c.txt") == "rel/dir"
    assert get_file_dir(".") == ""
    assert get_file_dir("..") == ""


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX paths")
@pytest.mark.parametrize("path", ["/", "//", ""])
def test_get_file_dir_without_parent_raises_path_error(path):
    with pytest.raises(PathError):
        get_file_dir(path)


def test_get_file_dir_accepts_pathlike(tmp_path):
    assert get_file_dir(tmp_path / "x.txt") == os.fspath(tmp_path)


def test_path_exists(tmp_path):
    assert path_exists(tmp_path)
    assert not path_exists(tmp_path / "missing")


def test_path_exists_empty_string_is_missing():
    assert not path_exists("")


@pytest.mark.parametrize("bad", [None, 0, 3.5])
def test_non_path_arguments_are_rejected(bad):
    """An int must never be opened as a file descriptor."""
    with pytest.raises(IoError):
        read_file(bad)
    with pytest.raises(IoError):
        write_file(bad, "x")
    with pytest.raises(PathError):
        get_file_dir(bad)
    assert not path_exists(bad)


def test_fd_number_is_not_read(tmp_path):
    path = tmp_path / "secret.txt"
    path.write_text("topsecret", encoding="utf-8")
    with open(path, "r", encoding="utf-8") as f:
        with pytest.raises(IoError):
            read_file(f.fileno())


def test_write_non_text_content_raises_io_error(tmp_path):
    with pytest.raises(IoError):
        write_file(str(tmp_path / "a.txt"), None)
    assert not (tmp_path / "a.txt").exists()
