import logging

import numpy as np
from rich.console import Console
from rich.logging import RichHandler

import dicekeep.config as config


def configure_logging(level=None, console=None):
    """Route logging through a rich handler.

    Args:
      level: A logging level name or number. Defaults to `config.log_level`.
      console: The `rich.console.Console` written to. Defaults to a new one.

    Returns:
      The installed handler.
    """
    if level is None:
        level = config.log_level
    if console is None:
        console = Console()
    handler = RichHandler(markup=True, show_time=False, console=console)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    return handler


def to_py_scalar(x):
    """Convert a numpy scalar or 0-d array to a Python scalar. Other values pass through."""
    if isinstance(x, np.generic):
        return x.item()
    if isinstance(x, np.ndarray):
        if x.ndim == 0:
            return x.item()
        raise ValueError(f"Expected 0-d array, got shape {x.shape}")
    return x
