"""Console logging for the qualified-names package.

Modules log through ``LOGGER`` or a child obtained with :func:`get_logger`,
so one handler and one level govern the whole package.
"""

import logging
from enum import StrEnum

from src import settings


class ConsoleColour(StrEnum):
    """ANSI escape sequences used by :class:`ColourConsoleFormatter`.

    <https://en.wikipedia.org/wiki/ANSI_escape_code#Select_Graphic_Rendition_parameters>
    """

    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    LIGHT_GREY = "\033[37m"
    HIGHLIGHT_RED = "\033[41m"
    BOLD = "\033[1m"


class PlainConsoleFormatter(logging.Formatter):
    """Uncoloured console formatter."""

    fmt = "{asctime} - {name} - {levelname} - {message}"

    def __init__(self) -> None:
        super().__init__(self.fmt, style="{", validate=True)


class ColourConsoleFormatter(PlainConsoleFormatter):
    """Wraps each formatted record in the colour assigned to its level."""

    COLOURS = {
        logging.DEBUG: ConsoleColour.LIGHT_GREY,
        logging.INFO: ConsoleColour.BLUE,
        logging.WARNING: ConsoleColour.YELLOW,
        logging.ERROR: ConsoleColour.RED,
        logging.CRITICAL: ConsoleColour.BOLD + ConsoleColour.HIGHLIGHT_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then colour it by level."""
        colour = self.COLOURS.get(record.levelno, ConsoleColour.RESET)
        return f"{colour}{super().format(record)}{ConsoleColour.RESET}"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``qualified-names.documents``."""
    return LOGGER.getChild(name)


_stream_handler = logging.StreamHandler()
_stream_handler.setLevel(settings.LOG_LEVEL)

if settings.LOG_COLOUR_ENABLED:  # pragma: nocover
    _stream_handler.setFormatter(ColourConsoleFormatter())
else:  # pragma: nocover
    _stream_handler.setFormatter(PlainConsoleFormatter())


LOGGER = logging.getLogger(settings.LOGGER_NAME)
LOGGER.setLevel(settings.LOG_LEVEL)
LOGGER.addHandler(_stream_handler)
