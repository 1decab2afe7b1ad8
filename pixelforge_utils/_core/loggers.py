"""
Logging setup for the applications & scripts using the utilities.

The utilities themselves only log to their own module-level loggers
(e.g. ``pixelforge_utils.timing``) and never configure the logging system.
The applications can either configure it on their own, or call
:func:`configure` for the typical setup: one stream handler on the root
logger with either a text or a JSON formatter.
"""
import logging
from typing import TYPE_CHECKING, Any, TextIO

# Luckily, we do not mock these ones in tests, so we can import them into our namespace.
try:
    # python-json-logger>=3.1.0
    from pythonjsonlogger.json import JsonFormatter as _pjl_JsonFormatter
except ImportError:
    # python-json-logger<3.1.0
    from pythonjsonlogger.jsonlogger import JsonFormatter as _pjl_JsonFormatter  # type: ignore

from pixelforge_utils._cogs.configs import configuration
from pixelforge_utils._cogs.configs.configuration import LogFormat


class UtilsFormatter(logging.Formatter):
    pass


class UtilsTextFormatter(UtilsFormatter, logging.Formatter):
    pass


class UtilsJsonFormatter(UtilsFormatter, _pjl_JsonFormatter):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)

    def add_fields(
            self,
            log_record: dict[str, object],
            record: logging.LogRecord,
            message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if 'severity' not in log_record:
            log_record['severity'] = (
                "debug" if record.levelno <= logging.DEBUG else
                "info" if record.levelno <= logging.INFO else
                "warn" if record.levelno <= logging.WARNING else
                "error" if record.levelno <= logging.ERROR else
                "fatal")


# Used to identify and remove our own handlers on repeated configuration,
# so that the messages are not duplicated (e.g. in tests or in notebooks).
if TYPE_CHECKING:
    class _UtilsStreamHandler(logging.StreamHandler[TextIO]):
        pass
else:
    class _UtilsStreamHandler(logging.StreamHandler):
        pass


def configure(
        debug: bool | None = None,
        verbose: bool | None = None,
        quiet: bool | None = None,
        log_format: LogFormat | str | None = None,
) -> None:
    settings = configuration.get_settings()
    log_level: int | str = (
        'DEBUG' if debug or verbose else
        'WARNING' if quiet else
        settings.logging.level)
    log_format = log_format if log_format is not None else settings.logging.format
    formatter = make_formatter(log_format=log_format)
    handler = _UtilsStreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.handlers[:] = [h for h in logger.handlers if not isinstance(h, _UtilsStreamHandler)]
    logger.addHandler(handler)
    logger.setLevel(log_level)

    # Prevent the low-level logging unless in the debug mode. Keep only the application's messages.
    # For no-propagation loggers, add a dummy null handler to prevent printing the messages.
    for name in ['asyncio']:
        logger = logging.getLogger(name)
        logger.propagate = bool(debug)
        if not debug:
            logger.handlers[:] = [logging.NullHandler()]


def make_formatter(
        log_format: LogFormat | str = LogFormat.FULL,
) -> UtilsFormatter:
    match log_format:
        case LogFormat.JSON:
            return UtilsJsonFormatter()
        case LogFormat():
            return UtilsTextFormatter(log_format.value)
        case str():
            return UtilsTextFormatter(log_format)
        case _:
            raise ValueError(f"Unsupported log format: {log_format!r}")
