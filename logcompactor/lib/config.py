import logging
import pathlib
from typing import List, Optional

import tomli
from pydantic import BaseModel, ConfigDict, Field

from logcompactor.lib.paths import CONFIG_PATH

log = logging.getLogger(__name__)


class RedisConfigSection(BaseModel):
    host: str = "localhost"
    port: int = 6379
    username: Optional[str] = None
    password: Optional[str] = None


class CompactorConfigSection(BaseModel):
    model_config = ConfigDict(extra="ignore")
    enabled: bool = False
    """Policy for runs whose job (and parent job) is not listed in jobs"""
    jobs: List[str] = []
    chunk_size: int = Field(default=64 * 1024, gt=0)
    compresslevel: int = Field(default=9, ge=0, le=9)
    retries: int = Field(default=0, ge=0)
    """Extra attempts for delete/rename of the log, 0 keeps a single attempt"""
    retry_delay: float = Field(default=0.5, ge=0)


class WorkerConfigSection(BaseModel):
    result_ttl: int = 24 * 60 * 60


class LogCompactorConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")
    compactor: CompactorConfigSection = CompactorConfigSection()
    redis: RedisConfigSection = RedisConfigSection()
    worker: WorkerConfigSection = WorkerConfigSection()

    @staticmethod
    def load(filename: pathlib.Path) -> "LogCompactorConfig":
        with open(filename, "rb") as f:
            config = tomli.load(f)
        return LogCompactorConfig.model_validate(config)


def load_config(config_path: pathlib.Path = CONFIG_PATH) -> LogCompactorConfig:
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        log.debug("%s doesn't exist, using default configuration", config_path)
        return LogCompactorConfig()
    return LogCompactorConfig.load(config_path)
