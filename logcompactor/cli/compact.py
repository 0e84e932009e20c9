import pathlib

import click

from logcompactor.lib.config import load_config


@click.command("compact")
@click.argument(
    "log_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "--enabled/--disabled",
    "enabled",
    default=None,
    help="Force compression on/off instead of resolving it from configuration",
)
@click.option("--job", "job", default=None, help="Job that owns the run")
@click.option(
    "--parent-job",
    "parent_job",
    default=None,
    help="Parent job of a multi-configuration run",
)
@click.pass_context
def compact(ctx, log_path, enabled, job, parent_job):
    """
    Compress finished run log in place
    """
    from logcompactor.compaction import (
        CompactStatus,
        RunFinalizedEvent,
        on_run_finalized,
    )

    config = load_config(ctx.obj["config_path"])
    event = RunFinalizedEvent(
        log_path=log_path, job=job, parent_job=parent_job, enabled=enabled
    )
    result = on_run_finalized(event, config)
    click.echo(str(result))
    if result.status == CompactStatus.failed:
        ctx.exit(1)
