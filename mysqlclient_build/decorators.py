import functools
import click
import sys
from .cli_logger import logger
from .errors import BuildError

def handle_exceptions(func):
    """A decorator to report failures of CLI commands and fail the build."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except BuildError as e:
            logger.error(e.format_message())
            sys.exit(1)
        except click.ClickException as e:
            logger.error(f"CLI Error: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
