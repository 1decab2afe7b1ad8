"""
Inspection of key-value mappings.

Only the plain mappings are recognised: the objects of the exact ``dict`` type.
All other structures, even if they are dict-like or derived from ``dict``
(``OrderedDict``, ``defaultdict``, ``Counter``, read-only proxies, etc),
are considered as specialised containers, not as plain mappings.
"""
from typing_extensions import TypeGuard

from pixelforge_utils.types import PlainMapping


def is_plain_mapping(obj: object) -> TypeGuard[PlainMapping]:
    return type(obj) is dict


def is_empty_object(obj: object) -> TypeGuard[PlainMapping]:
    """
    Check if the object is a plain mapping with no keys in it.

    Both criteria must be met. A specialised structure is never "empty" in
    this sense, even if it contains nothing: e.g. ``[]``, ``set()``, ``''``,
    ``OrderedDict()``, or an instance of a custom class.
    """
    return is_plain_mapping(obj) and len(obj) == 0
