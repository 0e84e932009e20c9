from .compact import compact_log
from .detection import is_gzip_file
from .hooks import RunFinalizedEvent, is_compression_enabled, on_run_finalized
from .reader import open_log
from .result import CompactReason, CompactResult, CompactStatus
from .sweep import sweep_directory

__all__ = [
    "compact_log",
    "is_gzip_file",
    "open_log",
    "sweep_directory",
    "on_run_finalized",
    "is_compression_enabled",
    "RunFinalizedEvent",
    "CompactReason",
    "CompactResult",
    "CompactStatus",
]
