import gzip
import logging
import pathlib
import time
import zlib
from typing import BinaryIO, Callable

from logcompactor.lib.paths import CANONICAL_LOG_NAME, side_file_path

from .detection import is_gzip_file
from .result import CompactReason, CompactResult

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_COMPRESSLEVEL = 9


def copy_stream(src: BinaryIO, dst: BinaryIO, chunk_size: int) -> int:
    copied = 0
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            break
        dst.write(chunk)
        copied += len(chunk)
    return copied


def gzip_file(
    source_path: pathlib.Path,
    target_path: pathlib.Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
) -> int:
    """
    Compresses source_path into target_path and returns number of copied bytes.

    Gzip trailer is written when the encoder is closed, before the
    underlying target file is closed.
    """
    with source_path.open("rb") as src, target_path.open("wb") as raw_dst:
        with gzip.GzipFile(
            filename=source_path.name,
            mode="wb",
            compresslevel=compresslevel,
            fileobj=raw_dst,
        ) as dst:
            copied = copy_stream(src, dst, chunk_size)
    return copied


def _attempt(action: Callable[[], None], retries: int, retry_delay: float) -> None:
    for attempt in range(retries + 1):
        try:
            action()
            return
        except OSError:
            if attempt == retries:
                raise
            log.debug(
                "Attempt %d/%d failed, retrying in %.2fs",
                attempt + 1,
                retries + 1,
                retry_delay,
                exc_info=True,
            )
            time.sleep(retry_delay)


def compact_log(
    path: pathlib.Path,
    enabled: bool,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
    retries: int = 0,
    retry_delay: float = 0.5,
) -> CompactResult:
    """
    Replaces finished plain-text log with its gzip-compressed version
    under the same name.

    Never raises on filesystem errors: failures are logged and reported
    via the returned CompactResult. On failure the files are left as they
    are:

    - compression_error: original log untouched, partial log.gz may remain
    - delete_error: both log and log.gz remain
    - rename_error: only log.gz remains
    """
    path = pathlib.Path(path)

    try:
        if is_gzip_file(path):
            log.debug("Skipping %s because the log is already compressed", path)
            return CompactResult.skipped(CompactReason.already_compressed)
    except OSError as e:
        log.debug("Can't probe %s (%s), treating it as not compressed", path, e)
    else:
        log.debug("%s is not a gzip file", path)

    if not enabled:
        log.debug("Skipping %s because log compression is not configured", path)
        return CompactResult.skipped(CompactReason.not_configured)

    if path.name != CANONICAL_LOG_NAME:
        log.debug(
            "Skipping %s because only '%s' files are compressed",
            path,
            CANONICAL_LOG_NAME,
        )
        return CompactResult.skipped(CompactReason.non_canonical_name)

    gzipped_path = side_file_path(path)
    log.debug("Compressing %s to %s", path, gzipped_path)
    try:
        expected_size = path.stat().st_size
        copied_bytes = gzip_file(
            path, gzipped_path, chunk_size=chunk_size, compresslevel=compresslevel
        )
    except (OSError, zlib.error) as e:
        log.warning("Failed to compress %s to %s: %s", path, gzipped_path, e)
        return CompactResult.failed(CompactReason.compression_error)

    if copied_bytes != expected_size:
        log.warning(
            "Expected to copy %d bytes but copied %d from %s",
            expected_size,
            copied_bytes,
            path,
        )
    log.debug("Finished compressing %s", path)

    try:
        _attempt(path.unlink, retries, retry_delay)
    except OSError as e:
        log.warning("Failed to delete %s after compression: %s", path, e)
        return CompactResult.failed(CompactReason.delete_error)

    try:
        _attempt(lambda: gzipped_path.rename(path), retries, retry_delay)
    except OSError as e:
        log.warning("Failed to rename %s to %s: %s", gzipped_path, path.name, e)
        return CompactResult.failed(CompactReason.rename_error)

    log.debug("Compressed log %s", path)
    return CompactResult.succeeded()
