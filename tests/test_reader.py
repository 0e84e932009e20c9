import gzip

from logcompactor.compaction.compact import compact_log
from logcompactor.compaction.reader import open_log

LOG_TEXT = "Started by timer\nRunning on agent-1\nFinished: FAILURE\n"


def test_plain_log(tmp_path):
    path = tmp_path / "log"
    path.write_text(LOG_TEXT)
    with open_log(path) as f:
        assert f.read() == LOG_TEXT


def test_compacted_log(tmp_path):
    path = tmp_path / "log"
    path.write_text(LOG_TEXT)
    compact_log(path, enabled=True)

    with open_log(path) as f:
        assert f.read() == LOG_TEXT


def test_invalid_utf8(tmp_path):
    path = tmp_path / "log"
    with gzip.open(path, "wb") as f:
        f.write(b"abc\xffdef\n")
    with open_log(path) as f:
        assert f.read() == "abc\ufffddef\n"
