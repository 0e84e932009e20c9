import pathlib

GZIP_MAGIC = b"\x1f\x8b"


def is_gzip_file(path: pathlib.Path) -> bool:
    """
    Checks whether file starts with gzip magic bytes.

    Only the header is sniffed, the rest of the stream is not validated.
    Raises OSError if file can't be opened.
    """
    with open(path, "rb") as f:
        return f.read(len(GZIP_MAGIC)) == GZIP_MAGIC
