import logging

import click

from logcompactor.lib.paths import initialize_config_file

log = logging.getLogger(__name__)


@click.command("init", help="Create configuration file from template")
@click.pass_context
def init(ctx):
    config_path = ctx.obj["config_path"]
    if initialize_config_file(config_path):
        log.info("Configuration written to %s", config_path)
    else:
        log.info("%s already exists, leaving it as is", config_path)
