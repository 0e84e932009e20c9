import logging
import pathlib
from typing import Optional

from pydantic import BaseModel

from logcompactor.lib.config import LogCompactorConfig

from .compact import compact_log
from .result import CompactReason, CompactResult, CompactStatus

log = logging.getLogger(__name__)


class RunFinalizedEvent(BaseModel):
    # Finished log of the run
    log_path: pathlib.Path
    # Job that owns the run
    job: Optional[str] = None
    # Parent job of a multi-configuration run
    parent_job: Optional[str] = None
    # Overrides configured policy when set
    enabled: Optional[bool] = None

    def describe(self) -> str:
        owner = "/".join(name for name in [self.parent_job, self.job] if name)
        return f"{owner or 'run'} ({self.log_path})"


def is_compression_enabled(
    config: LogCompactorConfig,
    job: Optional[str] = None,
    parent_job: Optional[str] = None,
) -> bool:
    # Multi-configuration runs have an extra parent to get to the project.
    for owner in [job, parent_job]:
        if owner is not None and owner in config.compactor.jobs:
            return True
    return config.compactor.enabled


def on_run_finalized(
    event: RunFinalizedEvent, config: LogCompactorConfig
) -> CompactResult:
    """
    Entrypoint called by the host when the run is finalized and its log
    is not written anymore. Never raises.
    """
    try:
        if event.enabled is not None:
            enabled = event.enabled
        else:
            enabled = is_compression_enabled(config, event.job, event.parent_job)
        result = compact_log(
            event.log_path,
            enabled,
            chunk_size=config.compactor.chunk_size,
            compresslevel=config.compactor.compresslevel,
            retries=config.compactor.retries,
            retry_delay=config.compactor.retry_delay,
        )
    except Exception:
        log.exception(f"Log compaction of {event.describe()} failed")
        return CompactResult.failed(CompactReason.compression_error)

    if result.status == CompactStatus.failed:
        log.info("Log compaction of %s: %s", event.describe(), result)
    elif result.status == CompactStatus.succeeded:
        log.info("Compressed build log of %s", event.describe())
    else:
        log.debug("Log compaction of %s: %s", event.describe(), result)
    return result
