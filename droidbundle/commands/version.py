import click
from .. import version_check
from ..cli_logger import logger


@click.command()
@click.option("--no-check", is_flag=True, help="Do not look for a newer release.")
def version(no_check):
    """Print the version of droidbundle."""
    logger.info(f"droidbundle version {version_check.current_version()}")
    if not no_check:
        version_check.check()
