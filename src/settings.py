"""Configuration values sourced from environment variables."""

import os
from typing import Final

from src.enums import ParseHint

_parse_hint = os.getenv(key="QUALIFIED_NAME_PARSE_HINT", default="heuristic")


DEFAULT_PARSE_HINT: Final[ParseHint] = ParseHint(_parse_hint)
LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="qualified-names")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)
