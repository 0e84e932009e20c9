import logging
import pathlib

import click

from logcompactor.lib.config import load_config

log = logging.getLogger(__name__)


@click.command("sweep")
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False, path_type=pathlib.Path),
)
@click.option(
    "--enabled/--disabled",
    "enabled",
    default=None,
    help="Force compression on/off (default taken from compactor.enabled)",
)
@click.pass_context
def sweep(ctx, root, enabled):
    """
    Compress all run logs found under ROOT
    """
    from logcompactor.compaction import CompactStatus, sweep_directory

    config = load_config(ctx.obj["config_path"])
    if enabled is None:
        enabled = config.compactor.enabled
    if not enabled:
        log.warning("Compression is disabled, logs will only be inspected")
    stats = sweep_directory(root, enabled, config)
    for status in CompactStatus:
        click.echo(f"{status.value}: {stats[status]}")
    if stats[CompactStatus.failed]:
        ctx.exit(1)
