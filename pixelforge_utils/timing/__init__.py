"""
Helpers for timing in asyncio applications.
"""
from pixelforge_utils.timing._timers import (
    NegativeDelayError,
    sleep,
)

__all__ = [
    'NegativeDelayError',
    'sleep',
]
