import logging
import pathlib

import click

from logcompactor.lib.paths import CONFIG_PATH

from .cat import cat
from .compact import compact
from .enqueue import enqueue
from .init import init
from .sweep import sweep
from .version import version
from .worker import worker


@click.group()
@click.option(
    "--config",
    "config_path",
    default=CONFIG_PATH,
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    show_default=True,
    help="Path to configuration file (defaults are used if it doesn't exist)",
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    is_flag=True,
    default=False,
    help="Show debug messages",
)
@click.pass_context
def main(ctx, config_path, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s][%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(compact)
main.add_command(sweep)
main.add_command(cat)
main.add_command(enqueue)
main.add_command(worker)
main.add_command(init)
main.add_command(version)
