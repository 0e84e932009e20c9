import click

from logcompactor.lib.config import load_config


@click.command(help="Start log compaction worker")
@click.pass_context
def worker(ctx):
    from logcompactor.compaction.worker import worker_main

    worker_main(load_config(ctx.obj["config_path"]))
