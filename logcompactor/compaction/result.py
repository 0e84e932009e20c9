import enum
from typing import Any, Dict, NamedTuple, Optional


class CompactStatus(enum.Enum):
    succeeded = "succeeded"
    skipped = "skipped"
    failed = "failed"


class CompactReason(enum.Enum):
    # Skips
    already_compressed = "already_compressed"
    not_configured = "not_configured"
    non_canonical_name = "non_canonical_name"
    # Failures
    compression_error = "compression_error"
    delete_error = "delete_error"
    rename_error = "rename_error"


class CompactResult(NamedTuple):
    status: CompactStatus
    reason: Optional[CompactReason] = None

    @classmethod
    def succeeded(cls) -> "CompactResult":
        return cls(CompactStatus.succeeded)

    @classmethod
    def skipped(cls, reason: CompactReason) -> "CompactResult":
        return cls(CompactStatus.skipped, reason)

    @classmethod
    def failed(cls, reason: CompactReason) -> "CompactResult":
        return cls(CompactStatus.failed, reason)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "reason": self.reason.value if self.reason is not None else None,
        }

    def __str__(self) -> str:
        if self.reason is None:
            return self.status.value
        return f"{self.status.value} ({self.reason.value})"
