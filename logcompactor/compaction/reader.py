import gzip
import pathlib
from typing import TextIO

from .detection import is_gzip_file


def open_log(path: pathlib.Path, encoding: str = "utf-8") -> TextIO:
    """
    Opens run log for reading, no matter if it was compacted or not.
    """
    if is_gzip_file(path):
        return gzip.open(path, "rt", encoding=encoding, errors="replace")
    return open(path, "r", encoding=encoding, errors="replace")
