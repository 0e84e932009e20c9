import pathlib

import click


@click.command("cat")
@click.argument(
    "log_path",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
def cat(log_path):
    """
    Print run log, decompressing it if needed
    """
    from logcompactor.compaction import open_log

    with open_log(log_path) as f:
        for line in f:
            click.echo(line, nl=False)
