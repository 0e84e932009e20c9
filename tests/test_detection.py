import gzip

import pytest

from logcompactor.compaction.detection import is_gzip_file


def test_plain_text(tmp_path):
    path = tmp_path / "log"
    path.write_text("Started by user admin\nFinished: SUCCESS\n")
    assert is_gzip_file(path) is False


def test_gzip(tmp_path):
    path = tmp_path / "log"
    with gzip.open(path, "wb") as f:
        f.write(b"Finished: SUCCESS\n")
    assert is_gzip_file(path) is True


def test_empty_file(tmp_path):
    path = tmp_path / "log"
    path.write_bytes(b"")
    assert is_gzip_file(path) is False


def test_single_magic_byte(tmp_path):
    path = tmp_path / "log"
    path.write_bytes(b"\x1f")
    assert is_gzip_file(path) is False


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        is_gzip_file(tmp_path / "log")
