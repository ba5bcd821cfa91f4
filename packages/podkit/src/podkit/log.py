from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "podkit.rich"


def configure_logging(verbose: bool = False) -> None:
    """Send `podkit` log records to stderr through Rich.

    Library modules only create loggers; the CLI calls this once. Repeated
    calls replace the previously installed handler. Records stop at the
    `podkit` logger so a host that configures the root logger sees them once.
    """
    logger = logging.getLogger("podkit")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
