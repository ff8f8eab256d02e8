import click
import json
from .. import config as config_module
from ..cli_logger import logger

def _load(ctx):
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found in {ctx.obj['path']}.")
    return conf

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the mysqlclient.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Show the effective [build] settings, defaults included."""
    conf = config_module.load_config(path=ctx.obj["path"])
    settings = config_module.build_settings(conf, path=ctx.obj["path"])
    click.echo(json.dumps(settings, indent=4))

@config.command(name="list")
@click.pass_context
def list_values(ctx):
    """List all configuration keys and values."""
    conf = _load(ctx)
    if not conf:
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the mysqlclient.toml file."""
    conf = _load(ctx)
    if not conf:
        return

    value = conf
    try:
        for k in key.split('.'):
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the mysqlclient.toml file; 'true'/'false' become booleans."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if value.lower() in ("true", "false"):
        value = value.lower() == "true"

    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the mysqlclient.toml file."""
    conf = _load(ctx)
    if not conf:
        return

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
        if config_module.save_config(conf, path=ctx.obj["path"]):
            logger.info(f"Unset '{key}'")
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
