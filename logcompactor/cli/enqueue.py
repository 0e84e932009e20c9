import logging
import pathlib

import click

from logcompactor.lib.config import load_config

log = logging.getLogger(__name__)


@click.command("enqueue", help="Submit finalized run log to compaction worker")
@click.argument(
    "log_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
)
@click.option("--job", "job", default=None, help="Job that owns the run")
@click.option(
    "--parent-job",
    "parent_job",
    default=None,
    help="Parent job of a multi-configuration run",
)
@click.pass_context
def enqueue(ctx, log_path, job, parent_job):
    from logcompactor.compaction import RunFinalizedEvent
    from logcompactor.compaction.worker import (
        enqueue_compaction,
        get_redis_connection,
    )

    config = load_config(ctx.obj["config_path"])
    event = RunFinalizedEvent(
        log_path=log_path.absolute(), job=job, parent_job=parent_job
    )
    rq_job = enqueue_compaction(
        event,
        connection=get_redis_connection(config.redis),
        result_ttl=config.worker.result_ttl,
    )
    log.info("Enqueued compaction of %s as %s", log_path, rq_job.id)
