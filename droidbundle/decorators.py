import functools
import sys
import click
from .cli_logger import logger
from .exceptions import CommandFailed, DroidBundleError


def handle_exceptions(func):
    """A decorator to report errors of CLI commands and exit non-zero."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except CommandFailed as e:
            logger.error(f"Error: {e.command[0]} exited with status {e.returncode}")
            logger.info("See the tool output above for details.")
            sys.exit(1)
        except DroidBundleError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        except OSError as e:
            logger.error(f"Error: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
