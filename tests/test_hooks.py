import gzip
import logging
import pathlib

import pytest

from logcompactor.compaction import hooks
from logcompactor.compaction.hooks import (
    RunFinalizedEvent,
    is_compression_enabled,
    on_run_finalized,
)
from logcompactor.compaction.result import CompactReason, CompactResult
from logcompactor.lib.config import LogCompactorConfig


@pytest.fixture
def config():
    return LogCompactorConfig.model_validate(
        {"compactor": {"enabled": False, "jobs": ["nightly", "matrix-build"]}}
    )


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "log"
    path.write_text("Started\nFinished: SUCCESS\n")
    return path


def test_enabled_for_job(config):
    assert is_compression_enabled(config, "nightly") is True


def test_enabled_for_parent_job(config):
    assert is_compression_enabled(config, "label=linux", "matrix-build") is True


def test_not_enabled(config):
    assert is_compression_enabled(config, "label=linux", "other") is False
    assert is_compression_enabled(config) is False


def test_default_policy():
    config = LogCompactorConfig.model_validate({"compactor": {"enabled": True}})
    assert is_compression_enabled(config, "anything") is True


def test_run_of_configured_job(config, log_path):
    event = RunFinalizedEvent(log_path=log_path, job="nightly")

    result = on_run_finalized(event, config)

    assert result == CompactResult.succeeded()
    assert gzip.decompress(log_path.read_bytes()) == b"Started\nFinished: SUCCESS\n"


def test_run_of_multi_configuration_job(config, log_path):
    event = RunFinalizedEvent(
        log_path=log_path, job="label=linux", parent_job="matrix-build"
    )

    assert on_run_finalized(event, config) == CompactResult.succeeded()


def test_run_of_unconfigured_job(config, log_path):
    event = RunFinalizedEvent(log_path=log_path, job="release")

    result = on_run_finalized(event, config)

    assert result == CompactResult.skipped(CompactReason.not_configured)
    assert log_path.read_text() == "Started\nFinished: SUCCESS\n"


def test_explicit_flag_wins(config, log_path):
    event = RunFinalizedEvent(log_path=log_path, job="nightly", enabled=False)

    result = on_run_finalized(event, config)

    assert result == CompactResult.skipped(CompactReason.not_configured)


def test_never_raises(config, log_path, monkeypatch, caplog):
    def broken_compact_log(*args, **kwargs):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(hooks, "compact_log", broken_compact_log)

    result = on_run_finalized(RunFinalizedEvent(log_path=log_path), config)

    assert result == CompactResult.failed(CompactReason.compression_error)
    assert "unexpected" in caplog.text


def test_describe(tmp_path):
    event = RunFinalizedEvent(
        log_path=tmp_path / "log", job="label=linux", parent_job="matrix-build"
    )
    assert event.describe().startswith("matrix-build/label=linux (")
    assert RunFinalizedEvent(log_path=tmp_path / "log").describe().startswith("run (")


def test_failure_warned_once(config, log_path, monkeypatch, caplog):
    original_unlink = pathlib.Path.unlink

    def locked_unlink(self, *args, **kwargs):
        if self == log_path:
            raise PermissionError(13, "Permission denied", str(self))
        return original_unlink(self, *args, **kwargs)

    monkeypatch.setattr(pathlib.Path, "unlink", locked_unlink)

    with caplog.at_level(logging.DEBUG):
        result = on_run_finalized(
            RunFinalizedEvent(log_path=log_path, job="nightly"), config
        )

    assert result == CompactResult.failed(CompactReason.delete_error)
    warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(warnings) == 1
    assert "Failed to delete" in warnings[0].message
