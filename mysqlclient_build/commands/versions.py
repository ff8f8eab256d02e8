import click
from ..catalog import all_versions

@click.command()
def versions():
    """List the client library versions that have bindings."""
    for version in all_versions():
        click.echo(f"{version.display_version:<15} {version.cfg}")
