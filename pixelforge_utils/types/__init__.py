"""
Type-only definitions, as used in the signatures of the utilities.

Nothing here has any runtime behaviour. Import these names for annotating
the code that passes values to the utilities or receives values from them.
"""
from typing import Any, TypeAlias

# Measured in seconds (not milliseconds), as everywhere in asyncio.
Duration: TypeAlias = int | float

# Only the exact dicts, not the subclasses or other mappings.
PlainMapping: TypeAlias = dict[Any, Any]

__all__ = [
    'Duration',
    'PlainMapping',
]
