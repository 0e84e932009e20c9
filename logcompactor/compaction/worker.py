import logging
import os
import socket
from typing import Any, Dict, Optional

from redis import Redis
from rq import Queue, Worker
from rq.job import Job

from logcompactor.lib.config import LogCompactorConfig, RedisConfigSection, load_config

from .hooks import RunFinalizedEvent, on_run_finalized

COMPACTION_QUEUE_NAME = "logcompactor-runs"
_WORKER_CONFIG: Optional[LogCompactorConfig] = None

logger = logging.getLogger(__name__)


def get_redis_connection(config: RedisConfigSection):
    redis = Redis(
        host=config.host,
        port=config.port,
        username=config.username,
        password=config.password,
    )
    return redis


def get_worker_name() -> str:
    return f"logcompactor-worker-{socket.gethostname()}-{os.getpid()}"


def compact_job(event: Dict[str, Any]) -> Dict[str, Any]:
    config = _WORKER_CONFIG if _WORKER_CONFIG is not None else load_config()
    result = on_run_finalized(RunFinalizedEvent.model_validate(event), config)
    return result.to_dict()


def enqueue_compaction(
    event: RunFinalizedEvent, connection: Redis, result_ttl: int
) -> Job:
    queue = Queue(name=COMPACTION_QUEUE_NAME, connection=connection)
    return queue.enqueue(
        compact_job,
        event.model_dump(mode="json"),
        meta={"log_path": event.log_path.as_posix()},
        result_ttl=result_ttl,
    )


def worker_main(config: LogCompactorConfig):
    global _WORKER_CONFIG
    _WORKER_CONFIG = config
    logger.info("Starting log compaction worker on queue %s", COMPACTION_QUEUE_NAME)
    worker = Worker(
        queues=[COMPACTION_QUEUE_NAME],
        name=get_worker_name(),
        connection=get_redis_connection(config.redis),
    )
    worker.work()
