"""
Helpers for ordered sequences (lists, tuples, strings, ranges, etc).
"""
from pixelforge_utils.array._elements import (
    last_element,
)

__all__ = [
    'last_element',
]
