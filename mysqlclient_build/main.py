import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """mysqlclient-build: locate libmysqlclient and pick matching bindings."""
    ctx.obj = {"path": path}

cli.add_command(resolve)
cli.add_command(check_version)
cli.add_command(versions)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
