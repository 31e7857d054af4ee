"""
Logging setup for the service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once.  Modules log through children of the
``quotes_service`` logger, e.g. ``logging.getLogger("quotes_service.api")``.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "quotes_service"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    The service logger always takes ``level``.  Handlers are only added
    if the root logger has none, so repeated ``create_app`` calls (tests,
    reloads) don't duplicate output.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(LOGGER_NAME).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def get_logger(name: str = "") -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
