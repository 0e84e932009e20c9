import logging

import click

from logcompactor.version import __version__

log = logging.getLogger(__name__)


@click.command("version", help="Show logcompactor version")
def version():
    log.info("logcompactor version: %s", __version__)
