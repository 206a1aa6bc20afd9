# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "taskcsv"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Configure the `taskcsv` logger with a single rich handler on stdout.

    Safe to call more than once per process; earlier handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove handlers from a previous call to avoid duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(markup=False, highlight=False, soft_wrap=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
