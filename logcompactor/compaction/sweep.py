import logging
import pathlib
from collections import Counter

from logcompactor.lib.config import LogCompactorConfig
from logcompactor.lib.paths import CANONICAL_LOG_NAME

from .compact import compact_log
from .result import CompactStatus

log = logging.getLogger(__name__)


def sweep_directory(
    root: pathlib.Path, enabled: bool, config: LogCompactorConfig
) -> Counter:
    """
    Compacts every canonical log file found under root.
    Returns number of logs per CompactStatus.
    """
    stats = Counter({status: 0 for status in CompactStatus})
    for log_path in sorted(root.rglob(CANONICAL_LOG_NAME)):
        if not log_path.is_file():
            continue
        result = compact_log(
            log_path,
            enabled,
            chunk_size=config.compactor.chunk_size,
            compresslevel=config.compactor.compresslevel,
            retries=config.compactor.retries,
            retry_delay=config.compactor.retry_delay,
        )
        log.debug("%s: %s", log_path, result)
        stats[result.status] += 1
    return stats
