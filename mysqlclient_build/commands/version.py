import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of mysqlclient-build."""
    try:
        ver = importlib.metadata.version("mysqlclient-build")
        click.echo(f"mysqlclient-build version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of mysqlclient-build. Is it installed correctly?")
