import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dir_hasher"

_handler: RichHandler | None = None


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Install a single rich handler on the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(_handler)

    return logger


def log(level: str, component: str, message: str) -> None:
    logging.getLogger(f"{LOGGER_NAME}.{component}").log(
        getattr(logging, level.upper(), logging.INFO),
        message,
    )
