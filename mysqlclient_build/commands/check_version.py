import click
from ..catalog import display_names
from ..cli_logger import logger
from ..resolver import resolve_version

@click.command("check-version")
@click.argument("version")
def check_version(version):
    """Show which supported version a version string resolves to."""
    resolved = resolve_version(version)
    if resolved is None:
        logger.error(f"`{version}` does not match any supported version.")
        logger.info(f"Supported versions: {', '.join(display_names())}")
        raise SystemExit(1)
    click.echo(f"{resolved.display_version} (cfg: {resolved.cfg}, bindings: {resolved.binding_version})")
