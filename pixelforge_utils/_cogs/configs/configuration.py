"""
All configuration flags, options, settings to fine-tune the utilities.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

The active settings are taken from :data:`settings_var` if it is set in the
current context (e.g. per asyncio task); otherwise, the process-wide defaults
are used, which can be modified in place: e.g.::

    import pixelforge_utils

    settings = pixelforge_utils.get_settings()
    settings.timing.negative_delays = pixelforge_utils.NegativeDelayPolicy.REJECT

Some of the settings are flags, some are scalars, some are enums
(but all of them have reasonable defaults).
"""
import contextvars
import dataclasses
import enum
import logging


class NegativeDelayPolicy(enum.Enum):
    """ What to do with the delays below zero (e.g. for the already passed deadlines). """
    CLAMP = 'clamp'
    REJECT = 'reject'


class LogFormat(enum.Enum):
    """ Log formats, as accepted by :func:`configure`. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = '-json-'  # not used for formatting, only for detection


@dataclasses.dataclass
class TimingSettings:

    negative_delays: NegativeDelayPolicy = NegativeDelayPolicy.CLAMP
    """
    How to treat the negative delays in :func:`sleep`.

    With ``CLAMP`` (the default), they are treated as zero delays:
    the sleep is over on the next iteration of the event loop.

    With ``REJECT``, a :class:`NegativeDelayError` is raised immediately,
    and nothing is scheduled.
    """


@dataclasses.dataclass
class LoggingSettings:

    format: LogFormat | str = LogFormat.FULL
    """
    The default log format for :func:`configure` if none is passed explicitly.
    Either one of the predefined formats, or a ``%``-style format string.
    """

    level: int = logging.INFO
    """
    The default log level for :func:`configure` when no verbosity flags are set.
    """


@dataclasses.dataclass
class UtilsSettings:
    timing: TimingSettings = dataclasses.field(default_factory=TimingSettings)
    logging: LoggingSettings = dataclasses.field(default_factory=LoggingSettings)


settings_var: contextvars.ContextVar[UtilsSettings] = contextvars.ContextVar('settings_var')

_defaults = UtilsSettings()


def get_settings() -> UtilsSettings:
    """
    Get the settings active in the current context, or the process-wide defaults.
    """
    try:
        return settings_var.get()
    except LookupError:
        return _defaults
