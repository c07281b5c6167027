"""Logging setup for the tagdirs CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are configured here, once, by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from tagdirs.locator.diagnostics import TRACE
from tagdirs.utils.formatting import err_console

_ROOT_LOGGER = "tagdirs"


def verbosity_to_level(verbose: int, quiet: bool) -> int:
    """Map CLI verbosity flags to a logging level.

    Args:
        verbose: Number of -v flags given.
        quiet: Whether -q was given. Takes precedence over verbose.

    Returns:
        Logging level for the ``tagdirs`` logger.
    """
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return TRACE
    if verbose == 1:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: int = 0, quiet: bool = False) -> logging.Logger:
    """Configure the ``tagdirs`` logger to write through Rich to stderr.

    Calling it again replaces the previously installed handler.

    Returns:
        The configured ``tagdirs`` logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbose, quiet))
    logger.propagate = False
    return logger
