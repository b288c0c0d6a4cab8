import json
import click
from .. import config as config_module
from ..cli_logger import logger


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the droidbundle.toml configuration file."""
    pass


@config.command(name="list")
@click.pass_context
def list_(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found.")
        return
    click.echo(json.dumps(conf, indent=4))


@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the droidbundle.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found.")
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
def set_(ctx, key, value):
    """Set a value in the droidbundle.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value
    except (AttributeError, TypeError):
        logger.error(f"Error: Key '{key}' cannot be set in {config_module.CONFIG_FILE}: a parent key is not a table")
        return

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")
