"""
Helpers for key-value mappings.
"""
from pixelforge_utils.object._mappings import (
    is_empty_object,
    is_plain_mapping,
)

__all__ = [
    'is_empty_object',
    'is_plain_mapping',
]
