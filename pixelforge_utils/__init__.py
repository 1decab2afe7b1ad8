"""
The main module for all the exported functions & classes.

The individual groups of utilities can also be imported selectively
from their sub-packages: ``pixelforge_utils.array``, ``pixelforge_utils.object``,
``pixelforge_utils.timing``, and ``pixelforge_utils.types`` (types only).
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the library's top-level interface,
# as it is seen by the users. So, we export the individual functions.

from pixelforge_utils.array import (
    last_element,
)
from pixelforge_utils.object import (
    is_empty_object,
    is_plain_mapping,
)
from pixelforge_utils.timing import (
    NegativeDelayError,
    sleep,
)
from pixelforge_utils.types import (
    Duration,
    PlainMapping,
)
from pixelforge_utils._cogs.configs.configuration import (
    UtilsSettings,
    TimingSettings,
    LoggingSettings,
    NegativeDelayPolicy,
    LogFormat,
    settings_var,
    get_settings,
)
from pixelforge_utils._cogs.helpers.versions import (
    version as __version__,
)
from pixelforge_utils._core.loggers import (
    configure,
)

__all__ = [
    'last_element',
    'is_empty_object',
    'is_plain_mapping',
    'sleep',
    'NegativeDelayError',
    'Duration',
    'PlainMapping',
    'UtilsSettings',
    'TimingSettings',
    'LoggingSettings',
    'NegativeDelayPolicy',
    'LogFormat',
    'settings_var',
    'get_settings',
    'configure',
    '__version__',
]
