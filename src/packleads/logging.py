"""structlog-based logging configuration for Packleads."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, Self

import structlog
from structlog.stdlib import add_log_level
from structlog.types import EventDict

__all__ = [
    "LogLevel",
    "Profile",
    "add_log_severity",
    "configure_logging",
    "logger_name",
]

logger_name: str = "packleads"
"""Name of the configured application logger.

Updated by `configure_logging` and read by the request logger dependency.
"""


class Profile(Enum):
    """Logging profile for the application."""

    production = "production"
    """Log messages in JSON."""

    development = "development"
    """Log messages in a format intended for human readability."""


class LogLevel(Enum):
    """Python logging level.

    Any case variation is accepted when converting a string to an enum value
    via the class constructor.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: Any) -> Self | None:
        if not isinstance(value, str):
            return None
        value = value.upper()
        for member in cls:
            if member.value == value:
                return member
        return None


def add_log_severity(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the log level to the event dict as ``severity``.

    Intended for use as a structlog processor. Google Log Explorer looks for
    the level under ``severity`` rather than ``level``.

    Parameters
    ----------
    logger
        The wrapped logger object.
    method_name
        The name of the wrapped method (``warning`` or ``error``, for
        example).
    event_dict
        Current context and current event. Modified in place.

    Returns
    -------
    ``structlog.types.EventDict``
        The modified event dict with the added key.
    """
    event_dict["severity"] = add_log_level(logger, method_name, {})["level"]
    return event_dict


def configure_logging(
    *,
    name: str = "packleads",
    profile: Profile | str = Profile.production,
    log_level: LogLevel | str = LogLevel.INFO,
    add_timestamp: bool = False,
) -> None:
    """Configure logging and structlog.

    The named logger logs to standard output. In the ``development`` profile
    messages are key-value formatted for the terminal:

    .. code-block:: text

       [info     ] Contact form submitted        [packleads] client_ip=...

    In the ``production`` profile each message is a JSON object with the
    level under ``severity``.

    Parameters
    ----------
    name
        Name of the logger, normally the application name.
    profile
        Logging profile, as a `Profile` or its string value.
    log_level
        Python log level, as a `LogLevel` or a case-insensitive string.
    add_timestamp
        Whether to add an ISO-format timestamp to each log message.
    """
    global logger_name  # noqa: PLW0603

    log_level = LogLevel(log_level)
    profile = Profile(profile)

    stream_handler = logging.StreamHandler(stream=sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(name)
    logger.handlers = []
    logger.addHandler(stream_handler)
    logger.setLevel(log_level.value)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
    )
    if profile == Profile.production:
        processors.append(add_log_severity)
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.stdlib.add_log_level)
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger_name = name
